#!/usr/bin/env python3
"""
Command-line interface for dice-algebra.

Evaluates one expression, given as an argument or read from stdin:

    dice-algebra "4d6h3 + 2"
    dice-algebra --v "(d8 + 2) * 2"
    echo "2d20l1" | dice-algebra
"""

import argparse
import sys

from dicealgebra.core.config import LOG_LEVELS, get_config
from dicealgebra.core.logging_config import get_logger, setup_logging
from dicealgebra.dice.random_source import get_random_source
from dicealgebra.dice.roller import DiceRoller

logger = get_logger(__name__)

PROMPT = "Please enter a dice algebra expression: "


def read_expression(args) -> str:
    """Expression from the command line, or one line from stdin."""
    if args.expression is not None:
        return args.expression

    print(PROMPT, end='', flush=True)
    try:
        return input()
    except EOFError:
        return ''


def cmd_roll(args):
    """Evaluate an expression and print the result."""
    try:
        expression = read_expression(args)
        if args.seed is not None:
            roller = DiceRoller(seed=args.seed)
        else:
            # Shared source, seeded from DICE_SEED when that is set
            roller = DiceRoller(source=get_random_source())
        result = roller.evaluate(expression)

        if not result.success:
            print(f"Error: {result.error}", file=sys.stderr)
            sys.exit(1)

        if args.verbose:
            print(result.data.description, end='')
        print(f"\nYour result is: {result.data.total}")
    except Exception as e:
        logger.debug("Unexpected failure while rolling", exc_info=True)
        print(f"An unexpected error has occurred!\n{e}", file=sys.stderr)
        sys.exit(2)


def build_parser(config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dice-algebra',
        description='Evaluate dice algebra expressions such as 4d6h3 + (d8 * 2)'
    )
    parser.add_argument('expression', nargs='?',
                        help='Expression to evaluate (read from stdin if omitted)')
    parser.add_argument('-v', '--v', '--verbose', dest='verbose', action='store_true',
                        default=config.verbose, help='Show every die rolled')
    parser.add_argument('--seed', type=int,
                        help='Random seed for reproducible rolls (default: DICE_SEED)')
    log_level = config.log_level if config.log_level in LOG_LEVELS else 'WARNING'
    parser.add_argument('--log-level', default=log_level,
                        type=str.upper, choices=LOG_LEVELS,
                        help='Logging level (default: DICE_LOG_LEVEL or WARNING)')
    parser.set_defaults(func=cmd_roll)
    return parser


def main(argv=None):
    """Main CLI entry point."""
    try:
        config = get_config()
    except ValueError as e:
        print(f"An unexpected error has occurred!\n{e}", file=sys.stderr)
        sys.exit(2)

    parser = build_parser(config)
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, use_colors=config.log_colors)

    args.func(args)


if __name__ == '__main__':
    main()
