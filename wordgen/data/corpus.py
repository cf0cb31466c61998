"""Corpus loading utilities."""

import logging
import re
from pathlib import Path
from typing import List, Union

from wordgen.errors import CorpusReadError


logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r'[\r\n]')


def split_words(text: str) -> List[str]:
    """Split raw corpus text into lowercase words, one per non-empty line."""
    return [line.lower() for line in _LINE_BREAK.split(text) if line]


def read_words(path: Union[str, Path], encoding: str = 'utf-8') -> List[str]:
    """Read training words from file.

    Args:
        path: Corpus file with one word per line
        encoding: Text encoding of the file (default: utf-8)

    Raises:
        CorpusReadError: If the file cannot be opened or decoded
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding=encoding, newline='') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusReadError(f"Cannot read corpus {path}: {e}") from e

    words = split_words(text)
    logger.info(f"Read {len(words)} words from {path}")
    return words
