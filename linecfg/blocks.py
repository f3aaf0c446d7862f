"""
Traversal of nested blocks.

A line whose first token starts with ``<`` opens a block and a line
whose first token starts with ``>`` closes the innermost one.  Nothing
else about a line matters at this level.
"""

from .constants import CLOSE_MARKER, OPEN_MARKER
from .exceptions import TokenizeError
from .tokenizer import LineParser

__all__ = ["get_next_line", "is_block_close", "is_block_open", "skip_current_block"]


def is_block_open(token):
    return token[:1] == OPEN_MARKER


def is_block_close(token):
    return token[:1] == CLOSE_MARKER


def get_next_line(ctx, parser):
    """
    Advance ``ctx`` to the next line that has at least one token and
    leave its tokens in ``parser``.

    Lines that fail to tokenize or that are blank or comments are
    skipped.

    Parameters
    ----------
    ctx : linecfg.context.LineContext

    parser : linecfg.tokenizer.LineParser

    Returns
    -------
    bool
        `False` at the end of the stream, in which case ``parser`` is
        left empty.
    """
    while True:
        line = ctx.get_line()
        if line is None:
            parser.parse("")
            return False

        try:
            parser.parse(line)
        except TokenizeError:
            continue

        if parser.num_tokens > 0:
            return True


def skip_current_block(ctx):
    """
    Discard lines up to and including the close of the block ``ctx`` is
    currently inside of.  Nested blocks are skipped along with it.

    Returns
    -------
    bool
        `True` if the matching close was found, `False` if the stream
        ended first.
    """
    if ctx is None:
        return False

    parser = LineParser()
    depth = 1
    while get_next_line(ctx, parser):
        first = parser.get_token(0)
        if is_block_close(first):
            depth -= 1
            if depth < 1:
                return True
        elif is_block_open(first):
            depth += 1

    return False
