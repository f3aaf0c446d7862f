"""
Binary payloads stored as base64 lines inside a block.

Each line holds the encoding of at most 40 bytes.  Decoding is
lenient: a line is decoded up to its first character outside the
base64 alphabet (padding included), and anything past
`LinecfgConfig.base64_stage_size` decoded bytes on one line is
dropped.
"""

import base64
import re

import numpy as np

from .blocks import is_block_close, is_block_open
from .config import get_config
from .constants import BASE64_ALPHABET, BINARY_CHUNK_SIZE
from .exceptions import TokenizeError
from .tokenizer import LineParser

__all__ = ["base64_decode", "base64_encode", "decode_binary", "encode_binary"]

_ALPHABET_PREFIX = re.compile(f"[{re.escape(BASE64_ALPHABET)}]*")


def _as_bytes(data):
    """
    View bytes-like objects and numpy arrays as raw bytes.
    """
    if isinstance(data, np.ndarray):
        return np.ascontiguousarray(data).tobytes()
    return memoryview(data).cast("B").tobytes()


def base64_encode(data):
    """
    Encode ``data`` with the standard alphabet and ``=`` padding.
    """
    return base64.b64encode(_as_bytes(data)).decode("ascii")


def base64_decode(text, capacity):
    """
    Decode the leading run of base64 alphabet characters in ``text``.

    Decoding stops at the first character outside the alphabet.  Bits
    that do not make up a whole byte are discarded, and at most
    ``capacity`` bytes are returned.
    """
    digits = _ALPHABET_PREFIX.match(text).group()
    # A lone trailing digit carries only 6 bits.
    if len(digits) % 4 == 1:
        digits = digits[:-1]
    digits += "=" * (-len(digits) % 4)
    return base64.b64decode(digits)[:capacity]


def encode_binary(ctx, data):
    """
    Write ``data`` to ``ctx`` as base64 lines of at most
    `~linecfg.constants.BINARY_CHUNK_SIZE` bytes each.

    Parameters
    ----------
    ctx : linecfg.context.LineContext

    data : bytes-like or np.ndarray
        Arrays are written in their in-memory byte order.
    """
    data = _as_bytes(data)
    for offset in range(0, len(data), BINARY_CHUNK_SIZE):
        ctx.add_line(base64_encode(data[offset : offset + BINARY_CHUNK_SIZE]))


def decode_binary(ctx, buffer):
    """
    Read base64 lines up to the close of the current block, appending
    the decoded bytes to ``buffer``.

    Lines inside nested blocks are skipped.  The buffer is not cleared
    first, and whatever was appended stays there if the block turns
    out to be unterminated.

    Parameters
    ----------
    ctx : linecfg.context.LineContext

    buffer : linecfg.buffer.GrowableBuffer

    Returns
    -------
    bool
        `True` if the block was closed, `False` if the stream ended
        first.
    """
    stage_size = get_config().base64_stage_size
    parser = LineParser()
    depth = 1
    while True:
        line = ctx.get_line()
        if line is None:
            return False

        try:
            parser.parse(line)
        except TokenizeError:
            continue
        if parser.num_tokens <= 0:
            continue

        first = parser.get_token(0)
        if is_block_open(first):
            depth += 1
        elif is_block_close(first):
            depth -= 1
            if depth == 0:
                return True
        elif depth == 1:
            buffer.append(base64_decode(first, stage_size))
