"""
Option Store

Persistent settings blobs, one per admin page, stored under
"{slug}_settings".
"""

import copy
import logging
from typing import Any, Dict, MutableMapping, Optional

from config.constants import SETTINGS_OPTION_SUFFIX

logger = logging.getLogger(__name__)


def option_key(slug: str) -> str:
    return f"{slug}{SETTINGS_OPTION_SUFFIX}"


class OptionStore:
    """
    Key/value option storage.

    The backing mapping defaults to a private dict; pass a shared mapping
    to persist across store instances. Values are deep-copied on the way
    in and out so callers cannot mutate stored settings by accident.
    """

    def __init__(self, backend: Optional[MutableMapping[str, Any]] = None):
        self._options: MutableMapping[str, Any] = backend if backend is not None else {}

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._options:
            return default
        return copy.deepcopy(self._options[key])

    def update(self, key: str, value: Any) -> bool:
        """Store value; False when it equals what is already stored"""
        if key in self._options and self._options[key] == value:
            return False
        self._options[key] = copy.deepcopy(value)
        logger.debug(f"Updated option '{key}'")
        return True

    def delete(self, key: str) -> bool:
        return self._options.pop(key, None) is not None

    def __contains__(self, key: object) -> bool:
        return key in self._options

    def get_settings(self, slug: str) -> Dict[str, Any]:
        """Settings blob for a page, empty dict when missing or malformed"""
        value = self.get(option_key(slug), {})
        return value if isinstance(value, dict) else {}

    def update_settings(self, slug: str, settings: Dict[str, Any]) -> bool:
        return self.update(option_key(slug), settings)
