"""Spelling Bee puzzle constants and default data locations."""

from pathlib import Path

# Answers must be at least 4 letters long
MIN_WORD_LENGTH = 4

# One queen letter plus six workers
WORKER_COUNT = 6

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# Prebuilt letter-key index produced by `beehive build`
DEFAULT_INDEX_PATH = DATA_DIR / "words_by_letters.json"

# Raw word list, e.g. https://github.com/dwyl/english-words/blob/master/words_alpha.txt
DEFAULT_WORDLIST_PATH = DATA_DIR / "words_alpha.txt"

OCR_MODEL = "claude-sonnet-4-20250514"
