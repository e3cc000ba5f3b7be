"""Unit tests for grouping posts into series."""

import pytest

from patternbook.posts import Post, PostNotFoundError, build_series


def make(slug, date, series, make_post_text):
    return Post.from_text(slug, make_post_text(title=slug, date=date, series=series))


@pytest.fixture
def posts(make_post_text):
    return [
        make("third", "2019-03-01", "Patterns", make_post_text),
        make("first", "2019-01-01", "Patterns", make_post_text),
        make("b-second", "2019-02-01", "Patterns", make_post_text),
        make("a-second", "2019-02-01", "Patterns", make_post_text),
        make("tutorial", "2019-01-15", "Framework", make_post_text),
        make("loner", "2019-01-20", None, make_post_text),
    ]


def test_groups_by_name_and_skips_posts_without_series(posts):
    series = build_series(posts)
    assert list(series) == ["Framework", "Patterns"]
    assert all(p.slug != "loner" for group in series.values() for p in group)


def test_ordered_by_date_then_slug(posts):
    patterns = build_series(posts)["Patterns"]
    assert [p.slug for p in patterns] == ["first", "a-second", "b-second", "third"]
    assert len(patterns) == 4


def test_position_is_one_based(posts):
    patterns = build_series(posts)["Patterns"]
    assert patterns.position("first") == 1
    assert patterns.position("third") == 4


def test_position_of_unknown_post(posts):
    with pytest.raises(PostNotFoundError):
        build_series(posts)["Patterns"].position("tutorial")


def test_neighbours(posts):
    patterns = build_series(posts)["Patterns"]
    previous, following = patterns.neighbours("a-second")
    assert previous.slug == "first"
    assert following.slug == "b-second"
    assert patterns.neighbours("first")[0] is None
    assert patterns.neighbours("third")[1] is None


def test_no_posts_no_series():
    assert build_series([]) == {}
