"""PATTERNBOOK posts CLI: list, show and check blog posts.

Behavior
- Posts are read from ``ctx.obj["posts_dir"]`` (set by the top-level command;
  the bundled posts unless ``--posts-dir``/``PATTERNBOOK_POSTS_DIR`` is given).
- Post text and tables go to **stdout**; notices and problems go to **stderr**.

Failure modes
- Unknown or malformed slug → ``ClickException`` naming the slug.
- Unparseable front matter on ``show`` → ``ClickException`` with the reason.
- ``check`` exits with status 1 when any post has an error (or a warning,
  with ``--strict``).
"""

from __future__ import annotations

import json
from pathlib import Path

import click
import click_extra as clickx
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from patternbook import config
from patternbook.posts import (
    FileSystemPostRepository,
    Post,
    PostError,
    PostRepository,
    Series,
    Severity,
    build_series,
    validate_posts,
)

from .helpers import error, file_link, success, warn


def _repository(ctx: click.Context) -> FileSystemPostRepository:
    obj = ctx.find_root().obj or {}
    posts_dir: Path = obj.get("posts_dir") or config.get_posts_dir()
    return FileSystemPostRepository(posts_dir)


def _console(ctx: click.Context) -> Console:
    return Console(color_system=None if ctx.color is False else "auto")


def _series_label(post: Post, series: dict[str, Series]) -> str:
    if post.series is None:
        return ""
    group = series[post.series]
    return f"{post.series} {group.position(post.slug)}/{len(group)}"


def _load_all(repository: PostRepository) -> list[Post]:
    try:
        return repository.list()
    except PostError as e:
        raise click.ClickException(f"{e}\nRun 'patternbook posts check' for details.") from e


@click.group(cls=clickx.ExtraGroup)
def posts() -> None:
    """Blog post commands."""


@posts.command(name="list")
@click.option("--series", "series_name", help="Only list posts from this series.")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of a table.")
@click.pass_context
def list_posts(ctx: click.Context, series_name: str | None, as_json: bool) -> None:
    """List posts ordered by date."""
    repository = _repository(ctx)
    all_posts = _load_all(repository)
    series = build_series(all_posts)
    if series_name is not None:
        all_posts = [p for p in all_posts if p.series == series_name]

    if as_json:
        payload = [
            {
                "slug": p.slug,
                "title": p.title,
                "author": p.author,
                "date": p.date.isoformat(),
                "series": p.series,
                "position": series[p.series].position(p.slug) if p.series else None,
                "tags": list(p.front_matter.tags),
            }
            for p in all_posts
        ]
        click.echo(json.dumps(payload, indent=2))
        return

    table = Table(title=f"Posts in {repository.root}")
    table.add_column("Slug", no_wrap=True)
    table.add_column("Date", no_wrap=True)
    table.add_column("Title")
    table.add_column("Author")
    table.add_column("Series")
    for post in all_posts:
        table.add_row(
            post.slug,
            post.date.isoformat(),
            post.title,
            post.author,
            _series_label(post, series),
        )
    _console(ctx).print(table)


@posts.command()
@click.argument("slug")
@click.option("--raw", is_flag=True, help="Print the Markdown source unchanged.")
@click.pass_context
def show(ctx: click.Context, slug: str, raw: bool) -> None:
    """Show a single post, rendered for the terminal."""
    repository = _repository(ctx)
    try:
        post = repository.get(slug)
    except PostError as e:
        raise click.ClickException(str(e)) from e

    if raw:
        text = post.path.read_text(encoding="utf-8") if post.path else post.to_text()
        click.echo(text, nl=False)
        return

    console = _console(ctx)
    console.print(f"[bold]{post.title}[/bold]")
    byline = f"{post.author} · {post.date:%d %B %Y} · {post.reading_minutes()} min read"
    console.print(byline, style="dim")
    if post.series is not None:
        group = build_series(_load_all(repository))[post.series]
        console.print(
            f"Part {group.position(post.slug)} of {len(group)} in {post.series}",
            style="dim",
        )
        previous, following = group.neighbours(post.slug)
        if previous is not None:
            console.print(f"Previous: {previous.title} ({previous.slug})", style="dim")
        if following is not None:
            console.print(f"Next: {following.title} ({following.slug})", style="dim")
    if post.path is not None:
        click.echo(file_link(post.path, post.path.name))
    console.print()
    console.print(Markdown(post.body))


@posts.command()
@click.option("--strict", is_flag=True, help="Treat warnings as errors.")
@click.pass_context
def check(ctx: click.Context, strict: bool) -> None:
    """Validate the front matter and content of every post."""
    repository = _repository(ctx)
    problems = validate_posts(repository)
    checked = len(repository.slugs())

    for problem in problems:
        line = f"{problem.slug}: {problem.message}"
        if problem.severity is Severity.ERROR:
            error(line)
        else:
            warn(line)

    failing = [p for p in problems if strict or p.severity is Severity.ERROR]
    if failing:
        ctx.exit(1)
    if problems:
        success(f"{checked} posts checked, {len(problems)} warning(s).")
    else:
        success(f"{checked} posts checked, no problems found.")
