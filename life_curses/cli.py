"""Command-line entry point."""
import argparse
import logging
import re
import sys
from typing import List, Optional

from .config import LifeConfig, LifeConfigError
from .driver import run
from .utils.patterns import pattern_names

USAGE = """\
Usage: life-curses [OPTION]...
Displays a simulation of John Conway's Game of Life

-d delay         Specifies the delay (in ms) between each generation.
                 Default is 100 ms.

-g generations   Specifies the number of generations to simulate.
                 Default is 5000.

-h height        Specifies the height of the game board. Default is 24.

-w width         Specifies the width of the game board. Default is 80.

--forever        Keep simulating until interrupted, ignoring -g.

--seed N         Seed the random board with N instead of the clock.

--pattern NAME   Start from a built-in pattern instead of a random board.
                 One of: {patterns}

--plain          Print frames to standard output instead of using curses.

--headless       Simulate without drawing and print a summary at the end.

-v, --verbose    Log debug messages to standard error.

-?               Display help.
"""

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


class UsageRequested(Exception):
    """Raised when the command line asks for, or earns, the usage text."""


class _Parser(argparse.ArgumentParser):

    def error(self, message):
        raise UsageRequested(message)


def atoi(text: str) -> int:
    """Parse leading digits the way C's atoi does; anything else is 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog='life-curses', add_help=False, allow_abbrev=False)
    parser.add_argument('-w', dest='width', default='80')
    parser.add_argument('-h', dest='height', default='24')
    parser.add_argument('-d', dest='delay', default='100')
    parser.add_argument('-g', dest='generations', default='5000')
    parser.add_argument('-?', dest='show_help', action='store_true')
    parser.add_argument('--forever', action='store_true')
    parser.add_argument('--seed', default=None)
    parser.add_argument('--pattern', default=None)
    renderer = parser.add_mutually_exclusive_group()
    renderer.add_argument('--plain', dest='renderer', action='store_const', const='plain')
    renderer.add_argument('--headless', dest='renderer', action='store_const', const='headless')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def parse_config(argv: Optional[List[str]] = None) -> LifeConfig:
    """
    Turn command-line arguments into a validated config.

    Raises:
        UsageRequested: help was asked for or the arguments are unusable
    """
    args, extras = build_parser().parse_known_args(argv)
    if extras:
        raise UsageRequested(f"unrecognized arguments: {' '.join(extras)}")
    if args.show_help:
        raise UsageRequested("help requested")

    config = LifeConfig(
        width=atoi(args.width),
        height=atoi(args.height),
        delay_ms=atoi(args.delay),
        generations=None if args.forever else atoi(args.generations),
        seed=atoi(args.seed) if args.seed is not None else None,
        pattern=args.pattern,
        renderer=args.renderer or 'curses',
        verbose=args.verbose,
    )
    try:
        return config.validate()
    except LifeConfigError as exc:
        raise UsageRequested(str(exc)) from exc


def show_usage() -> None:
    print(USAGE.format(patterns=', '.join(pattern_names())))


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        config = parse_config(argv)
    except UsageRequested:
        show_usage()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
        stream=sys.stderr,
    )
    run(config)
    return 0
