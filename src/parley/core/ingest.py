# src/parley/core/ingest.py
"""
Dictionary file ingestion.

One entry per line:
    word:definition|example1|example2

Missing separators leave the remaining fields empty. Extra "|" fields
past example2 are ignored.
"""

import logging
from pathlib import Path

from parley.core.errors import ResourceNotFoundError
from parley.core.lexicon import DictionaryEntry, LexicalStore

logger = logging.getLogger(__name__)


def parse_line(line: str) -> DictionaryEntry | None:
    if not line.strip():
        return None

    word, _, rest = line.partition(":")
    fields = rest.split("|")[:3]
    fields += [""] * (3 - len(fields))
    definition, example1, example2 = fields

    return DictionaryEntry(
        word=word,
        definition=definition,
        examples=(example1, example2),
    )


def load_dictionary(path: str | Path, store: LexicalStore) -> int:
    """Upsert every entry of a dictionary file. Returns rows stored."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ResourceNotFoundError("dictionary", str(path), e.strerror or str(e)) from e

    stored = 0
    skipped = 0
    for line in text.splitlines():
        entry = parse_line(line)
        if entry is None:
            continue
        if store.upsert(entry):
            stored += 1
        else:
            skipped += 1

    if skipped:
        logger.warning(f"{skipped} entries from {path} could not be stored")
    logger.info(f"Dictionary loaded: {stored} entries from {path}")
    return stored
