from .. import generic_io
from ..context import FileLineContext


def open_for_read(filename):
    """
    Open ``filename`` as a line context.  A failed open raises `OSError`
    for the command runner to report.
    """
    return FileLineContext(reader=generic_io.get_file(filename, mode="r"))
