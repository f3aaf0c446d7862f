"""
linecfg: Python library for reading and writing nested, line-oriented
configuration streams with embedded binary and text payloads
"""

__all__ = [
    "Block",
    "GrowableBuffer",
    "LineParser",
    "__version__",
    "config_context",
    "create_file_read",
    "create_file_write",
    "create_memory_context",
    "decode_binary",
    "decode_textblock",
    "encode_binary",
    "encode_textblock",
    "get_config",
    "get_next_line",
    "make_escaped_string",
    "read_tree",
    "skip_current_block",
    "write_tree",
]


from ._version import version as __version__
from .binary import decode_binary, encode_binary
from .blocks import get_next_line, skip_current_block
from .buffer import GrowableBuffer
from .config import config_context, get_config
from .context import create_file_read, create_file_write, create_memory_context
from .escape import make_escaped_string
from .textblock import decode_textblock, encode_textblock
from .tokenizer import LineParser
from .tree import Block, read_tree, write_tree
