"""
Splits a single line into tokens.

Tokens are separated by spaces or tabs.  A token that starts with one
of the quote characters ``"``, ``'`` or `` ` `` runs to the next
occurrence of the same character, so it may contain whitespace and the
other two quote characters.  A line whose first token starts with
``#`` or ``;`` is a comment and has no tokens.
"""

from .constants import COMMENT_CHARS, QUOTE_CHARS
from .exceptions import TokenizeError

__all__ = ["LineParser", "tokenize"]

_BLANKS = " \t"


def tokenize(line):
    """
    Split ``line`` into a list of tokens.

    Raises
    ------
    TokenizeError
        If a quoted token is not terminated.
    """
    tokens = []
    pos = 0
    end = len(line)
    while True:
        while pos < end and line[pos] in _BLANKS:
            pos += 1
        if pos >= end:
            break

        if not tokens and line[pos] in COMMENT_CHARS:
            break

        quote = line[pos]
        if quote in QUOTE_CHARS:
            close = line.find(quote, pos + 1)
            if close < 0:
                msg = f"Unterminated {quote} quote at column {pos}"
                raise TokenizeError(msg)
            tokens.append(line[pos + 1 : close])
            pos = close + 1
        else:
            start = pos
            while pos < end and line[pos] not in _BLANKS:
                pos += 1
            tokens.append(line[start:pos])

    return tokens


class LineParser:
    """
    Holds the tokens of the most recently parsed line.
    """

    def __init__(self):
        self._tokens = []

    def parse(self, line):
        """
        Tokenize ``line``, replacing the current tokens.  On failure
        the parser is left with no tokens and `TokenizeError` is
        raised.
        """
        self._tokens = []
        self._tokens = tokenize(line)

    @property
    def tokens(self):
        return list(self._tokens)

    @property
    def num_tokens(self):
        return len(self._tokens)

    def get_token(self, index):
        """
        Return the token at ``index``, or an empty string if there is no
        such token.
        """
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return ""

    def __repr__(self):
        return f"<LineParser {self._tokens!r}>"
