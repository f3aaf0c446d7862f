"""
Byte streams underneath the file-backed line contexts.

A line context only ever reads forward one byte at a time or appends
whole lines, so the wrappers here need nothing beyond sequential
``read``/``write``.  Use `get_file` rather than instantiating the
classes directly.
"""

import io
import os
import pathlib

from . import util

__all__ = ["get_file"]


def _check_bytes(fd, mode):
    """
    Checks whether a given file-like object is opened in binary mode.
    """
    if isinstance(fd, io.IOBase):
        return not isinstance(fd, io.TextIOBase)

    if mode == "r":
        return isinstance(fd.read(0), bytes)

    try:
        fd.write(b"")
    except TypeError:
        return False
    return True


class GenericFile(metaclass=util._InheritDocstrings):
    """
    A one-directional byte stream.

    Parameters
    ----------
    fd : file-like object
        Must have ``read`` in mode ``"r"`` and ``write`` in mode ``"w"``.

    mode : str
        ``"r"`` or ``"w"``.

    close : bool, optional
        Close ``fd`` when this object is closed.  Set when this object
        owns the stream.

    uri : str, optional
        The path to report in messages.
    """

    def __init__(self, fd, mode, close=False, uri=None):
        if not _check_bytes(fd, mode):
            msg = "File-like object must be opened in binary mode."
            raise ValueError(msg)

        self._fd = fd
        self._mode = mode
        self._close = close
        self._uri = uri

    def __enter__(self):
        return self

    def __exit__(self, type_, value, traceback):
        self.close()

    @property
    def mode(self):
        """
        ``'r'`` or ``'w'``.
        """
        return self._mode

    @property
    def uri(self):
        """
        The path of the file, if known.
        """
        return self._uri

    @property
    def owns_stream(self):
        """
        `True` if `close` closes the underlying object.
        """
        return self._close

    def take_ownership(self):
        """
        Make `close` close the underlying object.
        """
        self._close = True

    def read(self, size=-1):
        """
        Read at most ``size`` bytes, or everything up to EOF if ``size``
        is negative.  Returns an empty `bytes` object at EOF.
        """
        # Reading 0 bytes from some streams (sockets) makes them stop
        # working, so avoid doing that at all costs.
        if size == 0:
            return b""
        return self._fd.read(size)

    def read_byte(self):
        """
        Read a single byte.  Returns an empty `bytes` object at EOF.
        """
        return self.read(1)

    def write(self, content):
        """
        Write bytes to the file.  Returns the number of bytes the
        underlying object accepted, which is less than ``len(content)``
        on a short write.  Objects whose ``write`` returns `None` are
        assumed to have accepted everything.
        """
        written = self._fd.write(content)
        if written is None:
            return len(content)
        return written

    def flush(self):
        if hasattr(self._fd, "flush"):
            self._fd.flush()

    def close(self):
        """
        Close the file.  The underlying object is only closed if this
        object owns it.
        """
        if self._close and not self.is_closed():
            self._fd.close()

    def is_closed(self):
        """
        Returns `True` if the underlying file object is closed.
        """
        return getattr(self._fd, "closed", False)


class RealFile(GenericFile):
    """
    A file on a filesystem.  The path is taken from the file's name when
    not given.
    """

    def __init__(self, fd, mode, close=False, uri=None):
        super().__init__(fd, mode, close=close, uri=uri)

        if uri is None and isinstance(getattr(fd, "name", None), str):
            self._uri = str(pathlib.Path(fd.name).expanduser().absolute())


class InputStream(GenericFile):
    """
    Any other readable object, such as stdin or an `io.BytesIO`.
    """

    def __init__(self, fd, close=False, uri=None):
        super().__init__(fd, "r", close=close, uri=uri)


class OutputStream(GenericFile):
    """
    Any other writable object, such as stdout or an `io.BytesIO`.
    """

    def __init__(self, fd, close=False, uri=None):
        super().__init__(fd, "w", close=close, uri=uri)


def get_file(init, mode="r", uri=None, close=False):
    """
    Returns a `GenericFile` instance suitable for wrapping the given
    object ``init``.

    Parameters
    ----------
    init : object
        ``init`` may be:

        - A `str` or `pathlib.Path` file path.  The file is opened in
          binary mode and owned by the returned object.

        - An `io.IOBase` object opened in binary mode in the matching
          direction.

        - A ducktyped object with a ``read`` method (mode ``"r"``) or a
          ``write`` method (mode ``"w"``).

    mode : str
        Must be one of ``"r"`` or ``"w"``.

    uri : str, optional
        The path to report for the file.

    close : bool, optional
        If ``True``, closes the underlying file handle when the returned
        object is closed.  Ignored for paths, which are always closed.

    Returns
    -------
    fd : GenericFile

    Raises
    ------
    ValueError, TypeError, OSError
    """
    if mode not in ("r", "w"):
        msg = "mode must be 'r' or 'w'"
        raise ValueError(msg)

    if isinstance(init, (str, pathlib.Path)):
        realpath = os.path.expanduser(str(init))
        fd = open(realpath, mode + "b")  # noqa: SIM115
        return RealFile(fd, mode, close=True, uri=uri or realpath)

    if isinstance(init, io.StringIO):
        msg = "io.StringIO objects are not supported.  Use io.BytesIO instead."
        raise TypeError(msg)

    if isinstance(init, io.IOBase):
        if (mode == "r" and not init.readable()) or (mode == "w" and not init.writable()):
            msg = f"File is opened as '{getattr(init, 'mode', '?')}', but '{mode}' was requested"
            raise ValueError(msg)

        if isinstance(getattr(init, "name", None), str):
            return RealFile(init, mode, uri=uri, close=close)

    if mode == "w" and hasattr(init, "write"):
        return OutputStream(init, uri=uri, close=close)

    if mode == "r" and hasattr(init, "read"):
        return InputStream(init, uri=uri, close=close)

    msg = f"Can't handle '{init}' as a file for mode '{mode}'"
    raise ValueError(msg)
