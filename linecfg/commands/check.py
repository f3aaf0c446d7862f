"""
Command for verifying that every block in a file is closed
"""

import logging

from ..blocks import get_next_line, is_block_close, is_block_open
from ..tokenizer import LineParser
from ._helpers import open_for_read
from .main import Command

__all__ = ["check"]

logger = logging.getLogger(__name__)


class Check(Command):
    @classmethod
    def setup_arguments(cls, subparsers):
        parser = subparsers.add_parser(
            "check",
            help="Check that block markers are balanced.",
            description="""Exit with status 0 if every block is closed
            and no close marker is unmatched, 1 otherwise.""",
        )

        parser.add_argument("filename", help="File to check")

        parser.set_defaults(func=cls.run)

        return parser

    @classmethod
    def run(cls, args):
        return 0 if check(args.filename) else 1


def check(filename):
    """
    Returns `True` if the block markers in ``filename`` are balanced.
    """
    parser = LineParser()
    depth = 0
    lines = 0
    balanced = True
    with open_for_read(filename) as ctx:
        while get_next_line(ctx, parser):
            lines += 1
            first = parser.get_token(0)
            if is_block_open(first):
                depth += 1
            elif is_block_close(first):
                if depth == 0:
                    logger.error("%s: unmatched close marker after %d lines", filename, lines)
                    balanced = False
                    continue
                depth -= 1

    if depth:
        logger.error("%s: %d block(s) not closed at end of file", filename, depth)
        balanced = False

    logger.debug("%s: %d lines checked", filename, lines)
    return balanced
