"""Unit tests for the pattern catalog."""

import pytest

from patternbook import catalog, config
from patternbook.posts import FileSystemPostRepository


@pytest.fixture(scope="module")
def bundled():
    return FileSystemPostRepository(config.default_posts_dir())


def test_catalog_has_nineteen_unique_patterns():
    names = [entry.name for entry in catalog.PATTERNS]
    assert len(names) == 19
    assert len(set(names)) == 19


@pytest.mark.parametrize("entry", catalog.PATTERNS, ids=lambda e: e.name)
def test_every_pattern_has_a_post(entry, bundled):
    assert bundled.exists(entry.post_slug)
    assert entry.title in bundled.get(entry.post_slug).title


@pytest.mark.parametrize("entry", catalog.PATTERNS, ids=lambda e: e.name)
def test_every_demo_produces_output(entry):
    lines = catalog.run_demo(entry.name)
    assert lines
    assert all(isinstance(line, str) for line in lines)


@pytest.mark.parametrize(
    "name",
    ["chain-of-responsibility", "Chain of Responsibility", "chain_of_responsibility", "  CHAIN-of-responsibility "],
)
def test_get_pattern_normalizes_name(name):
    assert catalog.get_pattern(name).module == "chain_of_responsibility"


def test_unknown_pattern():
    with pytest.raises(catalog.UnknownPatternError) as exc_info:
        catalog.get_pattern("monad")
    assert exc_info.value.name == "monad"
    assert isinstance(exc_info.value, LookupError)


def test_framework_posts_are_bundled(bundled):
    for slug in catalog.FRAMEWORK_POSTS:
        assert bundled.get(slug).series == "Framework Internals"


def test_run_demo_logs(caplog):
    with caplog.at_level("DEBUG", logger="patternbook.catalog"):
        catalog.run_demo("strategy")
    assert "Running demo for Strategy (strategy)" in caplog.messages
