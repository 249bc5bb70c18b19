# src/parley/core/stopwords.py
"""
Stopword list loading.
"""

import logging
from pathlib import Path

from parley.core.errors import ResourceNotFoundError

logger = logging.getLogger(__name__)


def parse_stopwords(text: str) -> frozenset[str]:
    """One word per line, case-sensitive. Blank lines are skipped."""
    return frozenset(line for line in text.splitlines() if line)


def load_stopwords(path: str | Path) -> frozenset[str]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ResourceNotFoundError("stop words", str(path), e.strerror or str(e)) from e

    stopwords = parse_stopwords(text)
    logger.info(f"Loaded {len(stopwords)} stop words from {path}")
    return stopwords
