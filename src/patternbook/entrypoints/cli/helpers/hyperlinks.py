"""OSC-8 hyperlink utilities for the PATTERNBOOK CLI.

Detects whether the active text stream supports OSC-8 terminal hyperlinks and
renders URLs (or local post files) as clickable links, falling back to plain
text when unsupported. Pure formatting only.
"""

import os
import sys
from pathlib import Path
from typing import TextIO

KNOWN_TERMINALS = frozenset({"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"})


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether the target stream supports OSC-8 hyperlinks.

    Args:
        stream: Stream the link would be written to (defaults to stdout).

    Returns:
        bool: False when the stream is not a TTY. Otherwise True only for a
        conservative allowlist of terminals (``TERM_PROGRAM``, Windows
        Terminal, VTE-based terminals, Alacritty, Konsole). Some pagers may
        still strip the escapes.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    terminal_program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        terminal_program in KNOWN_TERMINALS
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix, etc.
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, text: str | None = None, stream: TextIO | None = None) -> str:
    """Return an OSC-8 hyperlink, or plain text for unsupported terminals.

    Args:
        url: Target URL.
        text: Label to show; defaults to the URL itself.
        stream: Stream the link will be written to (defaults to stdout).

    Returns:
        The label wrapped in OSC-8 sequences (BEL-terminated) when supported,
        otherwise just the label.
    """
    label = text or url
    if not supports_osc8(stream):
        return label
    return f"\x1b]8;;{url}\x07{label}\x1b]8;;\x07"


def file_link(path: Path, text: str | None = None, stream: TextIO | None = None) -> str:
    """Hyperlink to a local file, such as a post's Markdown source.

    Args:
        path: File to link to; resolved to an absolute ``file://`` URI.
        text: Label to show; defaults to `path` as given.
        stream: Stream the link will be written to (defaults to stdout).

    Returns:
        str: See `hyperlink`.
    """
    return hyperlink(path.resolve().as_uri(), text or str(path), stream)
