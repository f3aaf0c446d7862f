"""
Command for converting a block tree to YAML.
"""

import os

import yaml

from ..tree import read_tree
from ._helpers import open_for_read
from .main import Command

__all__ = ["to_yaml"]


class ToYaml(Command):
    @classmethod
    def setup_arguments(cls, subparsers):
        parser = subparsers.add_parser(
            "to_yaml",
            help="Convert a file to YAML.",
            description="""Convert the block structure of a file to a YAML
            document of nested names, parameters and entry tokens.""",
        )

        parser.add_argument("filename", nargs=1, help="""The file to convert to YAML.""")
        parser.add_argument(
            "--output",
            "-o",
            type=str,
            nargs="?",
            help="""The name of the output file.  If not provided, it
            will be the name of the input file with a '.yaml' extension.""",
        )

        parser.set_defaults(func=cls.run)

        return parser

    @classmethod
    def run(cls, args):
        return to_yaml(args.filename[0], args.output)


def to_yaml(input_, output=None):
    """
    Write the block tree of ``input_`` to ``output`` as YAML.

    Parameters
    ----------
    input_ : str
        The input file.

    output : str, optional
        The output file.  Defaults to ``input_`` with a ``.yaml``
        extension.
    """
    if output is None:
        base, _ = os.path.splitext(input_)
        output = base + ".yaml"

    with open_for_read(input_) as ctx:
        root = read_tree(ctx)

    with open(output, "w", encoding="utf-8") as fd:
        yaml.safe_dump(root.to_dict()["items"], fd, sort_keys=False, allow_unicode=True)
