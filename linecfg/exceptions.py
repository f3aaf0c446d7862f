__all__ = [
    "LineContextWarning",
    "LinecfgWarning",
    "StrayCloseWarning",
    "TokenizeError",
    "UnterminatedBlockWarning",
]


class LinecfgWarning(Warning):
    """
    The base warning class from which all linecfg warnings should inherit.
    """


class UnterminatedBlockWarning(LinecfgWarning):
    """
    The stream ended before one or more open blocks were closed.
    """


class StrayCloseWarning(LinecfgWarning):
    """
    A close marker was found with no open block to match it.
    """


class TokenizeError(ValueError):
    """
    Indicates that a line could not be split into tokens, for
    example because of an unterminated quote.
    """


class LineContextWarning(LinecfgWarning):
    """
    A line context could not be opened, or a write to it failed and the
    rest of its output is discarded.
    """
