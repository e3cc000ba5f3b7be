"""Unit tests for the Singleton example."""

import threading

import pytest

from patternbook.patterns.singleton import AppConfig, SingletonMeta, demo


@pytest.fixture(autouse=True)
def _fresh_config():
    AppConfig.reset()
    yield
    AppConfig.reset()


def test_same_instance_everywhere():
    first = AppConfig()
    first.set("theme", "dark")
    assert AppConfig() is first
    assert AppConfig().get("theme") == "dark"


def test_reset_creates_new_instance():
    first = AppConfig()
    AppConfig.reset()
    assert AppConfig() is not first


def test_one_instance_per_class():
    class Other(metaclass=SingletonMeta):
        pass

    try:
        assert Other() is Other()
        assert Other() is not AppConfig()
    finally:
        Other.reset()


def test_concurrent_construction_yields_one_instance():
    instances = []
    barrier = threading.Barrier(8)

    def construct():
        barrier.wait()
        instances.append(AppConfig())

    threads = [threading.Thread(target=construct) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len({id(i) for i in instances}) == 1


def test_singleton_built_inside_another_singleton():
    class Inner(metaclass=SingletonMeta):
        pass

    class Outer(metaclass=SingletonMeta):
        def __init__(self):
            self.inner = Inner()

    result = []
    worker = threading.Thread(target=lambda: result.append(Outer()))
    try:
        worker.start()
        worker.join(timeout=5)
        assert not worker.is_alive()
        assert result[0].inner is Inner()
        assert Outer() is result[0]
    finally:
        Outer.reset()
        Inner.reset()


def test_demo():
    assert demo() == [
        "same instance: True",
        "debug seen through second reference: True",
    ]
