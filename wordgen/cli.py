"""Command-line interface for training and generation."""

import argparse
import logging
import sys
from pathlib import Path

from wordgen.data.corpus import read_words
from wordgen.errors import WordGenError
from wordgen.models.frequency import FrequencyTable
from wordgen.utils.generator import DeadEndPolicy, Generator, GeneratorConfig


logger = logging.getLogger(__name__)


def setup_logging(level=logging.INFO):
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def train(path: Path) -> FrequencyTable:
    """Train a new table from a corpus file."""
    words = read_words(path)
    table = FrequencyTable.from_words(words)
    logger.info(
        f"Trained on {len(words)} words: {len(table)} main characters, "
        f"{table.total_pairs()} pairs"
    )
    return table


def generate(args) -> None:
    """Train on the corpus and print random words."""
    table = train(args.data)
    if args.show_table:
        print(table)

    config = GeneratorConfig(dead_end=DeadEndPolicy(args.dead_end), seed=args.seed)
    generator = Generator(table, config)
    for word in generator.random_words_with_range(args.min_length, args.max_length, args.count):
        print(word)


def non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate plausible words from a character bigram model'
    )
    parser.add_argument(
        '--data',
        type=Path,
        default=Path('names.txt'),
        help='Training corpus, one word per line'
    )
    parser.add_argument('--count', type=non_negative_int, default=100)
    parser.add_argument('--min-length', type=int, default=6)
    parser.add_argument(
        '--max-length',
        type=int,
        default=10,
        help='Exclusive upper bound on word length'
    )
    parser.add_argument('--seed', type=int)
    parser.add_argument(
        '--dead-end',
        choices=[p.value for p in DeadEndPolicy],
        default=DeadEndPolicy.RESTART.value,
        help='Restart the walk or truncate the word when no continuation exists'
    )
    parser.add_argument(
        '--show-table',
        action='store_true',
        help='Print the transition counts before the words'
    )
    parser.add_argument('--verbose', action='store_true')
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        generate(args)
    except WordGenError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == '__main__':
    main()
