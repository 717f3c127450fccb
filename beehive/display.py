"""Terminal output of the answer list."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, TextIO


def format_answers(answers: Iterable[str],
                   mark: Callable[[str], str] | None = None) -> str:
    """One answer per line; *mark* may append a suffix to a word."""
    lines = [word + (mark(word) if mark else "") for word in answers]
    return "".join(f"{line}\n" for line in lines)


def write_answers(answers: Iterable[str], out: TextIO | None = None,
                  mark: Callable[[str], str] | None = None) -> None:
    """Write the answers to *out* (stdout by default) and flush.

    Write failures propagate as OSError.
    """
    out = out or sys.stdout
    out.write(format_answers(answers, mark))
    out.flush()
