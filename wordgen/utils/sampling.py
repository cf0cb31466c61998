"""Random choices over a FrequencyTable.

All functions draw from an explicitly passed ``torch.Generator``; the
global torch RNG is never touched.
"""

from typing import Mapping, Optional

import torch

from wordgen.errors import EmptyModelError
from wordgen.models.frequency import FrequencyTable


def _weighted_choice(candidates: Mapping[str, int], rng: torch.Generator) -> Optional[str]:
    if not candidates:
        return None
    chars = list(candidates)
    weights = torch.tensor([candidates[c] for c in chars], dtype=torch.float)
    idx = torch.multinomial(weights, num_samples=1, generator=rng).item()
    return chars[idx]


def uniform_key(table: FrequencyTable, rng: torch.Generator) -> str:
    """Pick a main character uniformly at random.

    Raises:
        EmptyModelError: If the table has no main characters
    """
    keys = table.keys()
    if not keys:
        raise EmptyModelError()
    idx = torch.randint(len(keys), (1,), generator=rng).item()
    return keys[idx]


def sample_continuable_successor(
    table: FrequencyTable,
    char: str,
    rng: torch.Generator,
) -> Optional[str]:
    """Weighted choice among successors of ``char`` that are main characters.

    Only successors the walk can continue from are candidates. Returns
    ``None`` if ``char`` has no such successor.
    """
    candidates = {
        c: n for c, n in table.successors(char).items()
        if table.is_continuable(c)
    }
    return _weighted_choice(candidates, rng)


def sample_successor(
    table: FrequencyTable,
    char: str,
    rng: torch.Generator,
) -> Optional[str]:
    """Weighted choice among all successors of ``char``, unfiltered.

    Returns ``None`` if ``char`` is not a main character.
    """
    return _weighted_choice(table.successors(char), rng)
