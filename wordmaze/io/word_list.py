"""Word list loading from CSV files or URLs.

Each row is ``question, answer[, alternate, ...]``. Blank rows and rows whose
first cell starts with ``#`` are skipped.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import List

import requests

from ..core.exceptions import WordListError
from ..core.models import WordEntry
from ..data.normalization import clean_answer
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

REMOTE_PREFIXES = ("http://", "https://")


def parse_word_list(text: str) -> List[WordEntry]:
    entries: List[WordEntry] = []
    for line_number, row in enumerate(csv.reader(io.StringIO(text)), start=1):
        if not row or not any(cell.strip() for cell in row):
            continue
        if row[0].lstrip().startswith("#"):
            continue
        if len(row) < 2:
            raise WordListError(f"Row {line_number} needs a question and an answer: {row}")
        answer = clean_answer(row[1])
        if not answer:
            raise WordListError(f"Row {line_number} has an empty answer")
        alternates = [clean_answer(cell) for cell in row[2:] if cell.strip()]
        entries.append(WordEntry(question=row[0].strip(), answer=answer, alternates=alternates))
    if not entries:
        raise WordListError("Word list contains no entries")
    return entries


def fetch_word_list_text(url: str, timeout_seconds: float = 30.0) -> str:
    try:
        response = requests.get(url, timeout=timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise WordListError(f"Unable to fetch word list {url}: {exc}") from exc
    return response.text


def load_word_list(source: Path | str, timeout_seconds: float = 30.0) -> List[WordEntry]:
    """Load entries from a local CSV path or an ``http(s)`` URL."""

    location = str(source)
    if location.startswith(REMOTE_PREFIXES):
        LOGGER.info("Fetching word list from %s", location)
        text = fetch_word_list_text(location, timeout_seconds)
    else:
        path = Path(source)
        if not path.exists():
            raise WordListError(f"Input CSV file does not exist: {path}")
        text = path.read_text(encoding="utf-8")
    entries = parse_word_list(text)
    LOGGER.info("Loaded %s words from %s", len(entries), location)
    return entries
