"""
Whole-stream view of nested blocks.

`read_tree` collects every block of a stream into `Block` objects and
`write_tree` writes them back out.  Each non-directive line is kept as
its list of tokens, so payload lines survive a round trip only to the
extent that their tokens do.
"""

import warnings

from .blocks import get_next_line, is_block_close, is_block_open
from .constants import CLOSE_MARKER, COMMENT_CHARS, OPEN_MARKER, PAYLOAD_MARKER, QUOTE_CHARS
from .escape import make_escaped_string
from .exceptions import StrayCloseWarning, UnterminatedBlockWarning
from .tokenizer import LineParser

__all__ = ["Block", "read_tree", "write_block", "write_tree"]


class Block:
    """
    A named block with parameters and an ordered list of items.

    Items are either entries (lists of string tokens, one per line) or
    child `Block` instances.
    """

    def __init__(self, name="", params=(), items=()):
        self.name = name
        self.params = list(params)
        self.items = list(items)

    @property
    def children(self):
        return [item for item in self.items if isinstance(item, Block)]

    @property
    def entries(self):
        return [item for item in self.items if not isinstance(item, Block)]

    def add_entry(self, *tokens):
        self.items.append(list(tokens))

    def add_block(self, name, *params):
        """
        Append a new, empty child block and return it.
        """
        block = Block(name, params)
        self.items.append(block)
        return block

    def find(self, name):
        """
        Return the first child block called ``name``, or `None`.
        """
        for child in self.children:
            if child.name == name:
                return child
        return None

    def iter_blocks(self, depth=0):
        """
        Yield ``(depth, block)`` for this block and every block below
        it, depth first.
        """
        yield depth, self
        for child in self.children:
            yield from child.iter_blocks(depth + 1)

    def to_dict(self):
        """
        Convert to plain dicts and lists, for example to dump as YAML.
        """
        return {
            "name": self.name,
            "params": list(self.params),
            "items": [item.to_dict() if isinstance(item, Block) else list(item) for item in self.items],
        }

    def __eq__(self, other):
        if not isinstance(other, Block):
            return NotImplemented
        return (self.name, self.params, self.items) == (other.name, other.params, other.items)

    def __repr__(self):
        return f"<Block {self.name!r} params={self.params!r} items={len(self.items)}>"


def read_tree(ctx, parser=None):
    """
    Read every remaining line of ``ctx`` into a tree.

    Blank, comment and untokenizable lines are dropped.  Blocks still
    open when the stream ends are closed implicitly with an
    `UnterminatedBlockWarning`; a close marker with nothing to close is
    ignored with a `StrayCloseWarning`.

    Returns
    -------
    Block
        A root block with an empty name holding the top-level items.
    """
    if parser is None:
        parser = LineParser()

    root = Block()
    stack = [root]
    while get_next_line(ctx, parser):
        tokens = parser.tokens
        first = tokens[0]
        if is_block_open(first):
            block = Block(first[len(OPEN_MARKER) :], tokens[1:])
            stack[-1].items.append(block)
            stack.append(block)
        elif is_block_close(first):
            if len(stack) == 1:
                warnings.warn("Ignoring close marker outside of any block", StrayCloseWarning)
                continue
            stack.pop()
        else:
            stack[-1].items.append(tokens)

    if len(stack) > 1:
        names = ", ".join(repr(block.name) for block in stack[1:])
        msg = f"Stream ended inside {len(stack) - 1} unclosed block(s): {names}"
        warnings.warn(msg, UnterminatedBlockWarning)

    return root


# Leading characters that force a token to be quoted
_SPECIAL_LEADS = OPEN_MARKER + CLOSE_MARKER + PAYLOAD_MARKER + COMMENT_CHARS


def _is_plain(token):
    return (
        token != ""
        and token[0] not in _SPECIAL_LEADS
        and not any(c in " \t" or c in QUOTE_CHARS for c in token)
    )


def _format_token(token):
    return token if _is_plain(token) else make_escaped_string(token)


def write_block(ctx, block):
    """
    Write ``block``, including its own open and close lines.

    Raises
    ------
    ValueError
        If the block name cannot be written as part of the open marker
        token, or an entry cannot be written without being mistaken for
        a directive.
    """
    if any(c in " \t" for c in block.name):
        msg = f"Invalid block name {block.name!r}"
        raise ValueError(msg)

    ctx.add_line(" ".join([OPEN_MARKER + block.name] + [_format_token(p) for p in block.params]))
    write_tree(ctx, block)
    ctx.add_line(CLOSE_MARKER)


def write_tree(ctx, root):
    """
    Write the items of ``root``, without open and close lines for
    ``root`` itself.  This is the inverse of `read_tree`.
    """
    for item in root.items:
        if isinstance(item, Block):
            write_block(ctx, item)
            continue

        if not item:
            msg = "Cannot write an entry with no tokens"
            raise ValueError(msg)
        if is_block_open(item[0]) or is_block_close(item[0]):
            msg = f"Entry {item!r} would be read back as a block marker"
            raise ValueError(msg)
        ctx.add_line(" ".join(_format_token(token) for token in item))
