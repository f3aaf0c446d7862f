__all__ = ["make_escaped_string"]


def make_escaped_string(value):
    """
    Quote ``value`` so that it reads back as a single token.

    Double quotes are used unless ``value`` contains one, then single
    quotes, then backticks.  If ``value`` contains all three quote
    characters, it is wrapped in backticks and any backtick inside it
    becomes a single quote, so that case does not round-trip exactly.

    Parameters
    ----------
    value : str

    Returns
    -------
    str
    """
    has_double = '"' in value
    has_single = "'" in value
    has_backtick = "`" in value

    if not has_double:
        return f'"{value}"'
    if not has_single:
        return f"'{value}'"
    if not has_backtick:
        return f"`{value}`"

    body = value.replace("`", "'")
    return f"`{body}`"
