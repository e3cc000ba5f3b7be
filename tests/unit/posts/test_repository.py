"""Unit tests for the post repositories.

The same behaviours are checked against the filesystem and in-memory
implementations through a parametrized `repository` fixture.
"""

from pathlib import Path

import pytest

from patternbook.posts import (
    FileSystemPostRepository,
    FrontMatterError,
    InMemoryPostRepository,
    InvalidSlugError,
    Post,
    PostNotFoundError,
    UnreadablePostError,
)

# pylint: disable=redefined-outer-name


@pytest.fixture(params=["filesystem", "memory"])
def repository(request, posts_dir: Path):
    fs_repo = FileSystemPostRepository(posts_dir)
    if request.param == "filesystem":
        return fs_repo
    return InMemoryPostRepository([fs_repo.get(slug) for slug in fs_repo.slugs()])


def test_slugs_sorted(repository):
    assert repository.slugs() == ["first-post", "second-post", "standalone"]


def test_list_orders_by_date(repository):
    assert [p.slug for p in repository.list()] == [
        "first-post",
        "standalone",
        "second-post",
    ]


def test_get_returns_parsed_post(repository):
    post = repository.get("second-post")
    assert post.title == "Second"
    assert post.series == "Basics"


def test_exists(repository):
    assert repository.exists("standalone")
    assert not repository.exists("missing")


def test_unknown_slug(repository):
    with pytest.raises(PostNotFoundError) as exc_info:
        repository.get("missing")
    assert exc_info.value.slug == "missing"
    assert isinstance(exc_info.value, LookupError)


@pytest.mark.parametrize("slug", ["../secret", "First-Post", "a/b"])
def test_malformed_slug_rejected(repository, slug):
    with pytest.raises(InvalidSlugError):
        repository.get(slug)


# ---------------------------------------------------------------------------
# Filesystem specifics
# ---------------------------------------------------------------------------


def test_filesystem_post_records_path(posts_dir):
    post = FileSystemPostRepository(posts_dir).get("first-post")
    assert post.path == posts_dir / "first-post.md"


def test_filesystem_skips_invalid_file_names(posts_dir, caplog):
    (posts_dir / "README.md").write_text("# notes\n", encoding="utf-8")
    (posts_dir / "notes.txt").write_text("ignored\n", encoding="utf-8")
    (posts_dir / "folder.md").mkdir()

    with caplog.at_level("DEBUG", logger="patternbook.posts.filesystem"):
        slugs = FileSystemPostRepository(posts_dir).slugs()

    assert slugs == ["first-post", "second-post", "standalone"]
    assert "Skipping README.md: file name is not a valid slug" in caplog.messages


def test_filesystem_does_not_escape_root(tmp_path):
    root = tmp_path / "posts"
    root.mkdir()
    (tmp_path / "secret.md").write_text("---\n---\n", encoding="utf-8")
    with pytest.raises(InvalidSlugError):
        FileSystemPostRepository(root).get("../secret")


def test_filesystem_list_fails_on_broken_post(posts_dir):
    (posts_dir / "broken.md").write_text("no front matter\n", encoding="utf-8")
    with pytest.raises(FrontMatterError, match="^broken: "):
        FileSystemPostRepository(posts_dir).list()


def test_filesystem_invalid_utf8_is_unreadable(posts_dir):
    (posts_dir / "bad-post.md").write_bytes(b"\xff\xfe---\n")
    with pytest.raises(UnreadablePostError) as exc_info:
        FileSystemPostRepository(posts_dir).get("bad-post")
    assert exc_info.value.slug == "bad-post"
    assert exc_info.value.reason == "not valid UTF-8: byte 0xff at offset 0"


def test_filesystem_directory_named_like_a_post_is_unreadable(posts_dir):
    (posts_dir / "folder.md").mkdir()
    repo = FileSystemPostRepository(posts_dir)
    assert "folder" not in repo.slugs()
    with pytest.raises(UnreadablePostError, match="^Post 'folder': file cannot be read"):
        repo.get("folder")


def test_filesystem_empty_directory(tmp_path):
    assert FileSystemPostRepository(tmp_path).list() == []


# ---------------------------------------------------------------------------
# In-memory specifics
# ---------------------------------------------------------------------------


def test_memory_add_replaces_same_slug(make_post_text):
    repo = InMemoryPostRepository()
    repo.add(Post.from_text("post", make_post_text(title="Old")))
    repo.add(Post.from_text("post", make_post_text(title="New")))
    assert repo.slugs() == ["post"]
    assert repo.get("post").title == "New"
