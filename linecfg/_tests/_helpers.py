import io

from linecfg.buffer import GrowableBuffer
from linecfg.context import FileLineContext, create_file_read, create_file_write, create_memory_context


class MemoryPair:
    def __init__(self):
        self.buffer = GrowableBuffer()

    def writer(self):
        return create_memory_context(self.buffer)

    def reader(self):
        return create_memory_context(self.buffer)


class FilePair:
    def __init__(self, path):
        self.path = path

    def writer(self):
        return create_file_write(self.path)

    def reader(self):
        return create_file_read(self.path)


class ShortWriter:
    """
    A write-only stream that accepts ``limit`` writes and then starts
    reporting that nothing was written.
    """

    def __init__(self, limit):
        self.data = bytearray()
        self.calls = 0
        self.limit = limit

    def write(self, content):
        if not content:
            return 0
        self.calls += 1
        if self.calls > self.limit:
            return 0
        self.data += content
        return len(content)


def reader_for(content):
    """
    A file-backed read context over ``content``.
    """
    return FileLineContext(reader=io.BytesIO(content))


def read_all(ctx, capacity=None):
    lines = []
    while (line := ctx.get_line(capacity)) is not None:
        lines.append(line)
    return lines
