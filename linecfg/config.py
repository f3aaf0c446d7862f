"""
Methods for getting and setting linecfg global configuration
options.
"""

import codecs
import copy
import threading
from contextlib import contextmanager

__all__ = ["LinecfgConfig", "config_context", "get_config"]


DEFAULT_LINE_BUFFER_SIZE = 4096
DEFAULT_FORMAT_BUFFER_SIZE = 8192
DEFAULT_BASE64_STAGE_SIZE = 8192
DEFAULT_MEMORY_GRANULARITY = 256 * 1024
DEFAULT_ENCODING = "utf-8"


def _validate_size(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise ValueError(msg)
    if value <= 0:
        msg = f"{name} ({value}) must be > 0"
        raise ValueError(msg)
    return value


class LinecfgConfig:
    """
    Container for linecfg configuration options.  Users are not intended to
    construct this object directly; instead, use the `linecfg.get_config` and
    `linecfg.config_context` module methods.
    """

    def __init__(self):
        self._line_buffer_size = DEFAULT_LINE_BUFFER_SIZE
        self._format_buffer_size = DEFAULT_FORMAT_BUFFER_SIZE
        self._base64_stage_size = DEFAULT_BASE64_STAGE_SIZE
        self._memory_granularity = DEFAULT_MEMORY_GRANULARITY
        self._encoding = DEFAULT_ENCODING

    @property
    def line_buffer_size(self):
        """
        Get the capacity, in bytes, used when reading a line and no
        explicit capacity is given.  Lines are truncated to one byte
        less than this.

        Returns
        -------
        int
        """
        return self._line_buffer_size

    @line_buffer_size.setter
    def line_buffer_size(self, value):
        self._line_buffer_size = _validate_size("line_buffer_size", value)

    @property
    def format_buffer_size(self):
        """
        Get the size of the buffer a formatted line is rendered into
        before it is written.  Longer lines are truncated.

        Returns
        -------
        int
        """
        return self._format_buffer_size

    @format_buffer_size.setter
    def format_buffer_size(self, value):
        self._format_buffer_size = _validate_size("format_buffer_size", value)

    @property
    def base64_stage_size(self):
        """
        Get the maximum number of bytes decoded from a single base64
        line.  Anything beyond is dropped.

        Returns
        -------
        int
        """
        return self._base64_stage_size

    @base64_stage_size.setter
    def base64_stage_size(self, value):
        self._base64_stage_size = _validate_size("base64_stage_size", value)

    @property
    def memory_granularity(self):
        """
        Get the allocation granularity, in bytes, given to an empty
        buffer when a memory-backed context first writes to it.

        Returns
        -------
        int
        """
        return self._memory_granularity

    @memory_granularity.setter
    def memory_granularity(self, value):
        self._memory_granularity = _validate_size("memory_granularity", value)

    @property
    def encoding(self):
        """
        Get the text encoding used to convert lines to and from bytes.

        Returns
        -------
        str
        """
        return self._encoding

    @encoding.setter
    def encoding(self, value):
        codecs.lookup(value)
        self._encoding = value

    def __repr__(self):
        return (
            "<LinecfgConfig\n"
            f"  line_buffer_size: {self.line_buffer_size}\n"
            f"  format_buffer_size: {self.format_buffer_size}\n"
            f"  base64_stage_size: {self.base64_stage_size}\n"
            f"  memory_granularity: {self.memory_granularity}\n"
            f"  encoding: {self.encoding}\n"
            ">"
        )


class _ConfigLocal(threading.local):
    def __init__(self):
        self.config_stack = []


_global_config = LinecfgConfig()
_local = _ConfigLocal()


def get_config():
    """
    Get the current config, which may have been altered by
    one or more surrounding calls to `linecfg.config_context`.

    Returns
    -------
    linecfg.config.LinecfgConfig
    """
    if len(_local.config_stack) == 0:
        return _global_config

    return _local.config_stack[-1]


@contextmanager
def config_context():
    """
    Context manager that temporarily overrides linecfg configuration.
    The context yields a `linecfg.config.LinecfgConfig` instance that can be
    modified without affecting code outside of the context.
    """
    base_config = _global_config if len(_local.config_stack) == 0 else _local.config_stack[-1]

    config = copy.copy(base_config)
    _local.config_stack.append(config)

    try:
        yield config
    finally:
        _local.config_stack.pop()
