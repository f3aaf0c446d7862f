"""
Multi-line text stored inside a block, one ``|``-prefixed line per
line of text.
"""

import re

from .blocks import is_block_close, is_block_open
from .constants import PAYLOAD_MARKER
from .exceptions import TokenizeError
from .tokenizer import LineParser

__all__ = ["decode_textblock", "encode_textblock", "split_text_lines"]

# CR+LF and LF+CR count as a single break.
_LINE_BREAK = re.compile(r"\r\n|\n\r|\r|\n")

_SEPARATOR = "\r\n"


def split_text_lines(text):
    """
    Split ``text`` on any line break.  A break at the very end does not
    start another line, so empty text has no lines at all.
    """
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def encode_textblock(ctx, text):
    """
    Write ``text`` to ``ctx`` as payload lines.

    Parameters
    ----------
    ctx : linecfg.context.LineContext

    text : str
        May contain any mix of CR, LF and CR+LF line breaks.
    """
    for line in split_text_lines(text):
        ctx.add_line(PAYLOAD_MARKER + "%s", line)


def decode_textblock(ctx):
    """
    Read payload lines up to the close of the current block.

    Returns
    -------
    ok : bool
        `True` if the block was closed, `False` if the stream ended
        first.

    text : str
        The payload lines joined with CR+LF.  Whatever was read is
        returned even when ``ok`` is `False`.
    """
    parser = LineParser()
    parts = []
    depth = 1
    while True:
        line = ctx.get_line()
        if line is None:
            return False, _SEPARATOR.join(parts)

        if not line:
            continue

        try:
            parser.parse(line)
        except TokenizeError:
            pass
        else:
            if parser.num_tokens > 0:
                first = parser.get_token(0)
                if is_block_open(first):
                    depth += 1
                    continue
                if is_block_close(first):
                    depth -= 1
                    if depth == 0:
                        return True, _SEPARATOR.join(parts)
                    continue

        if depth == 1:
            content = line.lstrip(" \t")
            if content.startswith(PAYLOAD_MARKER):
                parts.append(content[len(PAYLOAD_MARKER) :])
