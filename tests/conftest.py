"""
Pytest configuration and shared fixtures for Orbitools tests.
"""
import json
import sys
import shutil
import tempfile
import pytest
from pathlib import Path
from typing import Any, Callable, Dict, Generator, List

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from orbitools.cache import MemoryCache, create_object_cache, create_transients
from orbitools.spacing import SpacingConfigResolver, StaticGlobalSettings


# ============================================================================
# Fixtures: Files & Directories
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def write_json(temp_dir: Path) -> Callable[[str, Any], Path]:
    """Write a JSON document under temp_dir and return its path."""
    def _write(relpath: str, data: Any) -> Path:
        path = temp_dir / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


# ============================================================================
# Fixtures: Configuration Data
# ============================================================================

@pytest.fixture
def plugin_spacings() -> List[Dict[str, str]]:
    return [
        {"slug": "xs", "size": "0.25rem", "name": "Extra Small"},
        {"slug": "sm", "size": "0.5rem", "name": "Small"},
        {"slug": "md", "size": "1rem", "name": "Medium"},
    ]


@pytest.fixture
def plugin_breakpoints() -> List[Dict[str, str]]:
    return [
        {"slug": "sm", "name": "Small", "value": "50.6875rem"},
        {"slug": "md", "name": "Medium", "value": "67.5625rem"},
    ]


@pytest.fixture
def defaults_file(write_json, plugin_spacings, plugin_breakpoints) -> Path:
    """Plugin defaults.json with spacings and breakpoints."""
    return write_json("plugin/config/defaults.json", {
        "defaults": {
            "spacings": plugin_spacings,
            "breakpoints": plugin_breakpoints,
        }
    })


@pytest.fixture
def theme_config_file(temp_dir: Path) -> Path:
    """Path of the theme's orbitools.json (not created)."""
    return temp_dir / "theme" / "config" / "orbitools.json"


# ============================================================================
# Fixtures: Resolver
# ============================================================================

@pytest.fixture
def clock():
    """Manually advanced clock for TTL tests."""
    class Clock:
        def __init__(self):
            self.now = 1_000_000.0

        def __call__(self) -> float:
            return self.now

        def advance(self, seconds: float) -> None:
            self.now += seconds

    return Clock()


@pytest.fixture
def cache_backend(clock) -> MemoryCache:
    return MemoryCache(clock=clock)


@pytest.fixture
def global_settings() -> StaticGlobalSettings:
    """Global settings with no spacing configuration."""
    return StaticGlobalSettings({})


@pytest.fixture
def resolver(defaults_file, theme_config_file, global_settings, cache_backend, clock) -> SpacingConfigResolver:
    """Resolver over temp plugin/theme files with a private cache."""
    return SpacingConfigResolver(
        defaults_file=defaults_file,
        theme_config_file=theme_config_file,
        global_settings=global_settings,
        cache=create_object_cache(cache_backend),
        transients=create_transients(cache_backend),
        clock=clock,
    )
