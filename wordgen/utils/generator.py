"""Random word generation from a trained FrequencyTable."""

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional

import torch

from wordgen.errors import EmptyModelError, InvalidLengthError
from wordgen.models.frequency import FrequencyTable
from wordgen.utils.sampling import (
    sample_continuable_successor,
    sample_successor,
    uniform_key,
)


logger = logging.getLogger(__name__)

MIN_LENGTH = 2


class DeadEndPolicy(enum.Enum):
    """What to do when the walk finds no continuable successor."""
    RESTART = 'restart'
    TRUNCATE = 'truncate'


@dataclass
class GeneratorConfig:
    """Configuration for the word generator."""
    dead_end: DeadEndPolicy = DeadEndPolicy.RESTART
    seed: Optional[int] = None


class Generator:
    """Random word synthesis helper for FrequencyTable models."""

    def __init__(
        self,
        table: FrequencyTable,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[torch.Generator] = None,
    ):
        """
        Args:
            table: Trained frequency table, read-only from here on
            config: Generation settings (default: GeneratorConfig())
            rng: Random source owned by this generator. Built from
                ``config.seed`` when omitted; an injected ``rng`` takes
                precedence and ``config.seed`` is ignored.
        """
        self.table = table
        self.config = config or GeneratorConfig()
        if rng is not None and self.config.seed is not None:
            logger.warning(f"Ignoring seed {self.config.seed}, using the injected random source")
        if rng is None:
            rng = torch.Generator()
            if self.config.seed is None:
                rng.seed()
            else:
                rng.manual_seed(self.config.seed)
        self.rng = rng

    def random_word(self, length: int) -> str:
        """Generate one word of ``length`` characters.

        With ``DeadEndPolicy.TRUNCATE`` the word may come out shorter.

        Raises:
            InvalidLengthError: If ``length`` is below 2
            EmptyModelError: If the table has no transitions
        """
        if length < MIN_LENGTH:
            raise InvalidLengthError(f"Word length must be at least {MIN_LENGTH}, got {length}")
        if not self.table:
            raise EmptyModelError()

        character = uniform_key(self.table, self.rng)
        word = [character]

        for _ in range(length - 2):
            next_char = self._next_char(character)
            if next_char is None:
                logger.warning(
                    f"No continuation after {''.join(word)!r}, "
                    f"truncating to {len(word) + 1} of {length} characters"
                )
                break
            character = next_char
            word.append(character)

        last_char = sample_successor(self.table, character, self.rng)
        if last_char is None:
            last_char = uniform_key(self.table, self.rng)
        word.append(last_char)
        return ''.join(word)

    def _next_char(self, character: str) -> Optional[str]:
        next_char = sample_continuable_successor(self.table, character, self.rng)
        if next_char is not None:
            return next_char
        if self.config.dead_end is DeadEndPolicy.TRUNCATE:
            return None

        for _ in range(len(self.table) - 1):
            anchor = uniform_key(self.table, self.rng)
            logger.debug(f"Dead end at {character!r}, restarting walk from {anchor!r}")
            next_char = sample_continuable_successor(self.table, anchor, self.rng)
            if next_char is not None:
                return next_char

        next_char = uniform_key(self.table, self.rng)
        logger.debug(f"No successor found for {character!r}, splicing in {next_char!r}")
        return next_char

    def random_length(self, min_length: int, max_length: int) -> int:
        """Draw a length uniformly from ``[min_length, max_length)``."""
        if min_length < MIN_LENGTH:
            raise InvalidLengthError(f"Minimum length must be at least {MIN_LENGTH}, got {min_length}")
        if max_length <= min_length:
            raise InvalidLengthError(f"Empty length range [{min_length}, {max_length})")
        return torch.randint(min_length, max_length, (1,), generator=self.rng).item()

    def random_word_with_range(self, min_length: int, max_length: int) -> str:
        return self.random_word(self.random_length(min_length, max_length))

    def random_words(self, length: int, count: int) -> List[str]:
        """Generate ``count`` independent words of the same length."""
        _check_count(count)
        return [self.random_word(length) for _ in range(count)]

    def random_words_with_range(self, min_length: int, max_length: int, count: int) -> List[str]:
        """Generate ``count`` independent words, each with its own random length."""
        _check_count(count)
        return [self.random_word_with_range(min_length, max_length) for _ in range(count)]


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
