"""
Commands for displaying summaries of block trees
"""

from ..tree import read_tree
from ._helpers import open_for_read
from .main import Command

__all__ = ["info"]


class Info(Command):
    @classmethod
    def setup_arguments(cls, subparsers):
        parser = subparsers.add_parser(
            "info",
            help="Print an outline of the blocks in a file.",
            description="Print an outline of the blocks in a file.",
        )

        parser.add_argument("filename", help="File to summarize")
        parser.add_argument("--max-depth", type=int, help="deepest block level to show")
        parser.add_argument("--show-params", dest="show_params", action="store_true")
        parser.add_argument("--no-show-params", dest="show_params", action="store_false")
        parser.set_defaults(show_params=True)

        parser.set_defaults(func=cls.run)

        return parser

    @classmethod
    def run(cls, args):
        info(args.filename, max_depth=args.max_depth, show_params=args.show_params)


def info(filename, max_depth=None, show_params=True):
    """
    Print one line per block: its name, parameters and entry count,
    indented by depth.
    """
    with open_for_read(filename) as ctx:
        root = read_tree(ctx)

    for depth, block in root.iter_blocks():
        if depth == 0:
            print(f"{filename}: {len(root.entries)} top-level entries")
            continue
        if max_depth is not None and depth > max_depth:
            continue

        line = "  " * depth + block.name
        if show_params and block.params:
            line += " " + " ".join(block.params)
        line += f" ({len(block.entries)} entries)"
        print(line)
