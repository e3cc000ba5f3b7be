"""Terminal message helpers for the PATTERNBOOK CLI.

Small helpers for rendering user-visible lines with emoji→ASCII fallbacks.
Messages write to stderr so stdout stays free for post text and demo output.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Decides whether to emit emojis or fall back to ASCII so terminals without
    UTF-8 don't raise `UnicodeEncodeError`. The stream is looked up on every
    call because `CliRunner` swaps it out.

    Args:
        character: The glyph to check (e.g. "⚠️", "✅").

    Returns:
        bool: True if the stream's encoding can represent it. A stream without
        an encoding is treated as ASCII.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Warning marker.

    Returns:
        str: "⚠️" when stderr can encode it, otherwise "[!]".
    """
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def success_glyph() -> str:
    """Success marker.

    Returns:
        str: "✅" when stderr can encode it, otherwise "[OK]".
    """
    return _glyph("✅", "[OK]")  # pragma: no mutate


def error_glyph() -> str:
    """Error marker.

    Returns:
        str: "❌" when stderr can encode it, otherwise "[X]".
    """
    return _glyph("❌", "[X]")  # pragma: no mutate


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Args:
        msg: The message to display, usually ``"<slug>: <problem>"``.

    Example:
        ``⚠️  memento-pattern: post has no code examples``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Args:
        msg: The message to display.

    Example:
        ``✅  21 posts checked, no problems found.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Args:
        msg: The message to display.

    Note:
        This only prints. Callers decide the exit status (``posts check``
        exits 1 after reporting every problem).

    Example:
        ``❌  broken-post: missing required field 'date'``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
