"""
Line contexts: sequential streams of text lines backed either by a
`~linecfg.buffer.GrowableBuffer` or by a file.

A context is either read or written, never both.  Writing never
raises on stream failure; instead the context records a sticky error
that the caller checks with `LineContext.has_error` once the whole
pass is done.

Use `create_file_read`, `create_file_write` or `create_memory_context`
rather than instantiating the classes directly.
"""

import warnings

from . import generic_io, util
from .buffer import GrowableBuffer
from .config import get_config
from .constants import CLOSE_MARKER, INDENT_WIDTH, LINE_TERMINATOR, MEMORY_LINE_TERMINATOR, OPEN_MARKER
from .exceptions import LineContextWarning

__all__ = [
    "FileLineContext",
    "LineContext",
    "MemoryLineContext",
    "create_file_read",
    "create_file_write",
    "create_memory_context",
]

_OPEN = OPEN_MARKER.encode("ascii")
_CLOSE = CLOSE_MARKER.encode("ascii")


def _render(template, args, limit, encoding):
    """
    Render ``template % args`` into at most ``limit - 1`` bytes.
    """
    text = template % args if args else template
    data = text.encode(encoding, "surrogateescape")
    if len(data) >= limit:
        data = data[: limit - 1]
    return data


class LineContext(metaclass=util._InheritDocstrings):
    """
    Base class for the memory- and file-backed line contexts.
    """

    def __init__(self):
        self._error = False

    def __enter__(self):
        return self

    def __exit__(self, type_, value, traceback):
        self.close()

    def add_line(self, template, *args):
        """
        Render ``template % args`` (or ``template`` as-is when no
        arguments are given) and append it as one line.  Does nothing
        once `has_error` is set.
        """
        raise NotImplementedError

    def get_line(self, capacity=None):
        """
        Return the next line, or `None` at the end of the stream.

        Parameters
        ----------
        capacity : int, optional
            Size of the line buffer in bytes.  At most ``capacity - 1``
            bytes of the line are returned.  Defaults to
            `LinecfgConfig.line_buffer_size`.
        """
        raise NotImplementedError

    @property
    def output_size(self):
        """
        Total number of bytes produced so far.
        """
        raise NotImplementedError

    @property
    def has_error(self):
        """
        `True` once a write has failed.  The flag is never cleared.
        """
        return self._error

    def close(self):
        """
        Release the resources owned by the context.
        """


class MemoryLineContext(LineContext):
    """
    A line context whose lines live in a `GrowableBuffer`, each followed
    by a NUL byte.

    The context only references the buffer; the caller owns it.  If the
    buffer cannot grow, it is emptied and detached, and the context
    behaves as an empty stream from then on.
    """

    def __init__(self, buffer):
        super().__init__()
        self._buffer = buffer
        self._pos = 0
        self._snapshot = None

    @property
    def buffer(self):
        return self._buffer

    def add_line(self, template, *args):
        if self._buffer is None or self._error:
            return

        config = get_config()
        data = _render(template, args, config.format_buffer_size, config.encoding)
        if not data:
            return

        if self._buffer.size == 0:
            self._buffer.granularity = config.memory_granularity

        if not self._buffer.append(data + MEMORY_LINE_TERMINATOR):
            msg = f"Unable to grow line buffer past {self._buffer.size} bytes; discarding output"
            warnings.warn(msg, LineContextWarning)
            self._buffer.resize(0)
            self._buffer = None
            self._error = True

    def get_line(self, capacity=None):
        if self._buffer is None:
            return None

        config = get_config()
        if capacity is None:
            capacity = config.line_buffer_size

        # Read contexts never change the buffer, so copy it out once.
        if self._snapshot is None:
            self._snapshot = self._buffer.tobytes()
        data = self._snapshot

        if self._pos >= len(data):
            return None

        end = data.find(MEMORY_LINE_TERMINATOR, self._pos)
        if end < 0:
            end = len(data)

        count = min(max(capacity - 1, 0), end - self._pos)
        line = data[self._pos : self._pos + count]
        self._pos = end + 1
        return line.decode(config.encoding, "surrogateescape")

    @property
    def output_size(self):
        if self._buffer is None:
            return 0
        return self._buffer.size


class FileLineContext(LineContext):
    """
    A line context that reads from or writes to a byte stream.

    Written lines are terminated with CR+LF and indented by two spaces
    per open block.  On reading, leading whitespace and blank lines are
    skipped.

    Parameters
    ----------
    reader : file-like or `~linecfg.generic_io.GenericFile`, optional
        Stream to read lines from.

    writer : file-like or `~linecfg.generic_io.GenericFile`, optional
        Stream to write lines to.

    Exactly one of ``reader`` and ``writer`` should be given.  The
    context takes ownership of the stream, a `GenericFile` opened with
    ``close=False`` included, and closes it in `close`.
    """

    def __init__(self, reader=None, writer=None):
        super().__init__()
        if reader is not None and writer is not None:
            msg = "A line context is either read or written, not both"
            raise ValueError(msg)

        self._reader = self._wrap(reader, "r")
        self._writer = self._wrap(writer, "w")
        self._indent = 0
        self._bytes_out = 0

    @staticmethod
    def _wrap(fd, mode):
        if fd is None:
            return None
        if isinstance(fd, generic_io.GenericFile):
            fd.take_ownership()
            return fd
        return generic_io.get_file(fd, mode, close=True)

    @property
    def indent(self):
        """
        Current indentation, in columns.
        """
        return self._indent

    def add_line(self, template, *args):
        if self._writer is None or self._error:
            return

        config = get_config()
        data = _render(template, args, config.format_buffer_size, config.encoding)

        indent = self._indent
        if data[:1] == _OPEN:
            self._indent += INDENT_WIDTH
        elif data[:1] == _CLOSE:
            self._indent -= INDENT_WIDTH
            indent = self._indent

        error = False
        reason = "short write"
        try:
            if indent > 0:
                self._bytes_out += indent
                error |= self._writer.write(b" " * indent) != indent
            error |= self._writer.write(data) != len(data)
            error |= self._writer.write(LINE_TERMINATOR) != len(LINE_TERMINATOR)
        except OSError as err:
            reason = str(err)
            error = True
        self._bytes_out += len(data) + len(LINE_TERMINATOR)

        if error:
            msg = f"Write to {self._writer.uri or 'stream'} failed ({reason}); remaining lines are discarded"
            warnings.warn(msg, LineContextWarning)
            self._error = True

    def get_line(self, capacity=None):
        config = get_config()
        if capacity is None:
            capacity = config.line_buffer_size
        if self._reader is None or capacity < 2:
            return None

        line = bytearray()
        while len(line) < capacity - 1:
            char = self._reader.read_byte()
            if not char:
                if not line:
                    return None
                break

            if char in b"\r\n":
                if not line:
                    continue
                break

            if not line and char in b" \t":
                continue

            line += char

        return line.decode(config.encoding, "surrogateescape")

    @property
    def output_size(self):
        return self._bytes_out

    def close(self):
        if self._writer is not None:
            try:
                self._writer.flush()
                self._writer.close()
            except OSError as err:
                warnings.warn(f"Closing {self._writer.uri or 'stream'} failed: {err}", LineContextWarning)
                self._error = True
            self._writer = None
        if self._reader is not None:
            self._reader.close()
            self._reader = None


def create_file_read(path):
    """
    Open ``path`` for reading lines.

    Returns
    -------
    FileLineContext or None
        `None` if the file could not be opened.
    """
    try:
        fd = generic_io.get_file(path, mode="r")
    except OSError as err:
        warnings.warn(f"Unable to open {path} for reading: {err}", LineContextWarning)
        return None
    return FileLineContext(reader=fd)


def create_file_write(path):
    """
    Open ``path`` for writing lines, truncating any existing file.

    Returns
    -------
    FileLineContext or None
        `None` if the file could not be opened.
    """
    try:
        fd = generic_io.get_file(path, mode="w")
    except OSError as err:
        warnings.warn(f"Unable to open {path} for writing: {err}", LineContextWarning)
        return None
    return FileLineContext(writer=fd)


def create_memory_context(buffer=None):
    """
    Create a context over ``buffer``.  Write to a fresh (or empty)
    buffer, or read from one that a previous memory context filled.

    Parameters
    ----------
    buffer : GrowableBuffer, optional
        A new empty buffer is created if not given.
    """
    if buffer is None:
        buffer = GrowableBuffer()
    return MemoryLineContext(buffer)
