"""Unit tests for `patternbook.framework.facade.Facade`."""

import pytest

from patternbook.framework import (
    BindingResolutionError,
    Container,
    Facade,
    FacadeNotBootedError,
)

# pylint: disable=too-few-public-methods,missing-class-docstring,no-member


class InMemoryCache:
    def __init__(self):
        self.data = {}

    def put(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)


class FakeCache(InMemoryCache):
    pass


class Cache(Facade):
    @classmethod
    def get_facade_accessor(cls):
        return "cache"


class NoAccessor(Facade):
    pass


@pytest.fixture
def container() -> Container:
    container = Container()
    container.singleton("cache", InMemoryCache)
    Facade.set_container(container)
    return container


def test_calls_are_forwarded_to_container_object(container):
    Cache.put("greeting", "hello")
    assert Cache.get("greeting") == "hello"
    assert container.make("cache").data == {"greeting": "hello"}


def test_root_is_resolved_once_and_cached():
    container = Container()
    container.bind("cache", InMemoryCache)
    Facade.set_container(container)

    Cache.put("a", 1)
    assert Cache.get("a") == 1
    assert Cache.get_facade_root() is Cache.get_facade_root()


def test_clear_resolved_instance_forces_new_lookup():
    container = Container()
    container.bind("cache", InMemoryCache)
    Facade.set_container(container)

    first = Cache.get_facade_root()
    Cache.clear_resolved_instance("cache")
    assert Cache.get_facade_root() is not first

    second = Cache.get_facade_root()
    Facade.clear_resolved_instances()
    assert Cache.get_facade_root() is not second


def test_swap_replaces_root_and_container_entry(container):
    fake = Cache.swap(FakeCache())
    Cache.put("k", "v")
    assert fake.data == {"k": "v"}
    assert container.make("cache") is fake


def test_swap_works_without_container():
    fake = Cache.swap(FakeCache())
    assert Cache.get_facade_root() is fake


def test_set_container_drops_cached_roots(container):
    Cache.put("k", "v")
    Facade.set_container(Container())
    with pytest.raises(BindingResolutionError):
        Cache.get("k")


def test_unbooted_facade_raises():
    with pytest.raises(FacadeNotBootedError) as exc_info:
        Cache.get("anything")
    assert exc_info.value.facade == "Cache"
    assert "set_container" in str(exc_info.value)


def test_facade_without_accessor_raises(container):
    with pytest.raises(AttributeError, match="NoAccessor does not define an accessor"):
        NoAccessor.anything()
    with pytest.raises(NotImplementedError, match="NoAccessor"):
        NoAccessor.get_facade_accessor()


@pytest.mark.parametrize("facade", [Facade, NoAccessor])
def test_hasattr_on_facade_without_accessor(container, facade):
    assert not hasattr(facade, "anything")


def test_private_names_are_not_forwarded(container):
    with pytest.raises(AttributeError):
        Cache._secret  # pylint: disable=pointless-statement,protected-access


def test_get_container(container):
    assert Facade.get_container() is container
    assert Cache.get_container() is container
