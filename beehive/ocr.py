"""Claude Vision API for reading the hive letters from a puzzle screenshot."""

from __future__ import annotations

import base64
import mimetypes
import re
import sys
from pathlib import Path

import anthropic

from beehive.constants import OCR_MODEL, WORKER_COUNT

HIVE_PROMPT = (
    "You read New York Times Spelling Bee screenshots. The puzzle is seven "
    "letters arranged as a honeycomb with one highlighted letter in the center. "
    "Ignore found words, scores and any other on-screen text. "
    "Reply with exactly two lines and nothing else:\n"
    "CENTER: <the center letter>\n"
    f"OUTER: <the {WORKER_COUNT} surrounding letters, no separators>"
)

_CENTER_RE = re.compile(r"CENTER\s*:\s*([A-Za-z])\b", re.IGNORECASE)
_OUTER_RE = re.compile(r"OUTER\s*:\s*([A-Za-z ,]+)", re.IGNORECASE)

SCREENSHOT_MEDIA_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}


def parse_hive(text: str) -> tuple[str, str]:
    """Extract (queen, workers) in lowercase from a model reply.

    Raises ValueError when either line is missing or the outer ring does
    not hold exactly WORKER_COUNT letters.
    """
    center = _CENTER_RE.search(text)
    outer = _OUTER_RE.search(text)
    if center is None or outer is None:
        raise ValueError(f"Could not parse puzzle letters from response: {text!r}")
    workers = "".join(ch for ch in outer.group(1) if ch.isalpha()).lower()
    if len(workers) != WORKER_COUNT:
        raise ValueError(
            f"Expected {WORKER_COUNT} outer letters, got {len(workers)}: {workers!r}"
        )
    return center.group(1).lower(), workers


def screenshot_block(path: Path) -> dict:
    """Base64 image content block for a puzzle screenshot."""
    media_type, _ = mimetypes.guess_type(path.name)
    if media_type not in SCREENSHOT_MEDIA_TYPES:
        raise ValueError(f"Unsupported screenshot format: {path.name}")
    return {
        "type": "image",
        "source": {
            "type": "base64",
            "media_type": media_type,
            "data": base64.standard_b64encode(path.read_bytes()).decode("ascii"),
        },
    }


def reply_text(message) -> str:
    """Join the text blocks of a model reply, skipping any other block types."""
    return "\n".join(
        block.text for block in message.content
        if getattr(block, "type", "text") == "text"
    )


def recognize_hive(image_path: str,
                   client: anthropic.Anthropic | None = None) -> tuple[str, str]:
    """Ask Claude Vision for the hive letters in a screenshot; return (queen, workers)."""
    path = Path(image_path)
    if not path.exists():
        raise FileNotFoundError(f"Image not found: {image_path}")

    client = client or anthropic.Anthropic()
    message = client.messages.create(
        model=OCR_MODEL,
        max_tokens=64,
        system=HIVE_PROMPT,
        messages=[{
            "role": "user",
            "content": [
                screenshot_block(path),
                {"type": "text", "text": "Which letters are in this hive?"},
            ],
        }],
    )
    return parse_hive(reply_text(message))


def confirm_hive(queen: str, workers: str) -> tuple[str, str]:
    """Show the recognized letters and let the user confirm or correct them.

    A correction is typed as the queen followed by the workers, e.g.
    "l pztoon". Anything unparsable, or a closed stdin, keeps the
    recognized letters.
    """
    print(f"\nRecognized queen {queen.upper()}, workers {workers.upper()}", file=sys.stderr)
    print("Correct? (Enter to accept, or type e.g. 'L PZTOON'): ", end="", file=sys.stderr)
    try:
        response = input().strip().lower()
    except EOFError:
        print("\nNo input, using recognized letters.", file=sys.stderr)
        return queen, workers

    if not response:
        return queen, workers

    parts = response.split()
    if (len(parts) == 2 and len(parts[0]) == 1 and len(parts[1]) == WORKER_COUNT
            and (parts[0] + parts[1]).isalpha()):
        print(f"Using queen {parts[0].upper()}, workers {parts[1].upper()}", file=sys.stderr)
        return parts[0], parts[1]

    print("Could not parse correction, using original.", file=sys.stderr)
    return queen, workers
