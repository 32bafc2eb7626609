#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unit Tests for Namespaced Cache Views
"""

import pytest

from orbitools.cache import MemoryCache, NamespacedCache, create_object_cache, create_transients


@pytest.fixture
def backend(clock):
    return MemoryCache(clock=clock)


class TestNamespacedCache:
    """Test key scoping over a shared backend"""

    def test_keys_are_prefixed(self, backend):
        objects = NamespacedCache(backend, "orbitools")
        objects.set("spacing_config", [1])
        assert list(backend.keys()) == ["orbitools:spacing_config"]
        assert objects.get("spacing_config") == [1]

    def test_namespaces_do_not_collide(self, backend):
        objects = NamespacedCache(backend, "orbitools")
        transients = NamespacedCache(backend, "transient")
        objects.set("k", "object")
        transients.set("k", "transient")
        assert objects.get("k") == "object"
        assert transients.get("k") == "transient"

    def test_clear_only_own_namespace(self, backend):
        objects = NamespacedCache(backend, "orbitools")
        transients = NamespacedCache(backend, "transient")
        objects.set("a", 1)
        objects.set("b", 2)
        transients.set("a", 3)
        assert objects.clear() == 2
        assert transients.get("a") == 3

    def test_default_ttl_applied(self, backend, clock):
        objects = NamespacedCache(backend, "orbitools", default_ttl=60)
        objects.set("a", 1)
        clock.advance(60)
        assert not objects.exists("a")

    def test_explicit_ttl_wins(self, backend, clock):
        objects = NamespacedCache(backend, "orbitools", default_ttl=60)
        objects.set("a", 1, ttl=300)
        clock.advance(120)
        assert objects.get("a") == 1

    def test_delete(self, backend):
        objects = NamespacedCache(backend, "orbitools")
        objects.set("a", 1)
        assert objects.delete("a") is True
        assert objects.get("a") is None

    @pytest.mark.parametrize("namespace", ["", "bad:name"])
    def test_invalid_namespace(self, backend, namespace):
        with pytest.raises(ValueError):
            NamespacedCache(backend, namespace)


class TestFactories:
    """Test package-level cache factories"""

    def test_object_cache_namespace_and_ttl(self, backend):
        objects = create_object_cache(backend)
        assert objects.namespace == "orbitools"
        assert objects.default_ttl == 604800

    def test_transients_share_backend(self, backend):
        objects = create_object_cache(backend)
        transients = create_transients(backend)
        objects.set("a", 1)
        transients.set("b", 2)
        assert sorted(backend.keys()) == ["orbitools:a", "transient:b"]
