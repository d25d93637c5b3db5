"""Read command input from a file path or stdin."""

from __future__ import annotations

import sys
from pathlib import Path

import typer


def read_source(path: str) -> bytes:
    """Return the raw bytes of path, or of stdin when path is ``-``."""
    if path == "-":
        return sys.stdin.buffer.read()
    try:
        return Path(path).read_bytes()
    except OSError as e:
        typer.echo(f"Cannot read '{path}': {e.strerror or e}", err=True)
        raise typer.Exit(code=1)
