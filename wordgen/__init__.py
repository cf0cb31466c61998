"""Character-level bigram word generator."""

from wordgen.errors import (
    CorpusReadError,
    EmptyModelError,
    InvalidLengthError,
    WordGenError,
)
from wordgen.models.frequency import FrequencyTable
from wordgen.utils.generator import DeadEndPolicy, Generator, GeneratorConfig

__all__ = [
    'CorpusReadError',
    'DeadEndPolicy',
    'EmptyModelError',
    'FrequencyTable',
    'Generator',
    'GeneratorConfig',
    'InvalidLengthError',
    'WordGenError',
]
