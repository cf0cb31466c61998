"""Character transition frequency model."""

import logging
from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

import torch


logger = logging.getLogger(__name__)


class FrequencyTable:
    """Counts of observed character-to-character transitions.

    Every adjacent pair ``(a, b)`` seen in a training word adds one to the
    count of ``b`` under the main character ``a``. Successors need not be
    main characters themselves. The table only ever grows.
    """

    def __init__(self):
        self._table: Dict[str, Counter] = {}

    @classmethod
    def from_words(cls, words: Iterable[str]) -> 'FrequencyTable':
        """Build a table and ingest ``words`` into it."""
        table = cls()
        table.ingest_words(words)
        return table

    def ingest_word(self, word: str) -> None:
        """Count every adjacent character pair of a word."""
        for main_char, next_char in zip(word, word[1:]):
            self._table.setdefault(main_char, Counter())[next_char] += 1

    def ingest_words(self, words: Iterable[str]) -> None:
        """Count the pairs of every word, in order."""
        n = 0
        for word in words:
            self.ingest_word(word)
            n += 1
        logger.debug(f"Ingested {n} words, table has {len(self._table)} main characters")

    def keys(self) -> List[str]:
        """Main characters in first-seen order."""
        return list(self._table)

    def successors(self, char: str) -> Mapping[str, int]:
        """Read-only successor counts of ``char`` (empty if never a main character)."""
        return MappingProxyType(self._table.get(char, {}))

    def count(self, main_char: str, next_char: str) -> int:
        return self._table.get(main_char, {}).get(next_char, 0)

    def is_continuable(self, char: str) -> bool:
        return char in self._table

    def pairs(self) -> Iterator[Tuple[str, str, int]]:
        for main_char, succs in self._table.items():
            for next_char, n in succs.items():
                yield main_char, next_char, n

    def total_pairs(self) -> int:
        return sum(n for _, _, n in self.pairs())

    def to_tensor(self) -> Tuple[List[str], torch.Tensor]:
        """Dense count matrix over every character in the table.

        Returns:
            chars: Sorted characters (main characters and successors)
            counts: ``torch.long`` matrix, ``counts[i, j]`` is the count of
                ``chars[i] -> chars[j]``
        """
        chars = sorted(set(self._table) | {c for succs in self._table.values() for c in succs})
        stoi = {ch: i for i, ch in enumerate(chars)}
        counts = torch.zeros((len(chars), len(chars)), dtype=torch.long)
        for main_char, next_char, n in self.pairs():
            counts[stoi[main_char], stoi[next_char]] += n
        return chars, counts

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, char: object) -> bool:
        return char in self._table

    def __bool__(self) -> bool:
        return bool(self._table)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return self._table == other._table

    def __repr__(self) -> str:
        return f"FrequencyTable(main_chars={len(self)}, pairs={self.total_pairs()})"

    def __str__(self) -> str:
        lines = []
        for main_char, succs in self._table.items():
            lines.append(f"{main_char}:")
            lines.extend(f"    {c}: {n}" for c, n in succs.items())
        return '\n'.join(lines)
