"""
A growable byte buffer backed by a numpy ``uint8`` array.
"""

import numpy as np

__all__ = ["GrowableBuffer"]


class GrowableBuffer:
    """
    A resizable region of bytes.

    Capacity is allocated in multiples of `granularity`, so a run of
    small appends only reallocates occasionally.  A failed resize
    leaves the logical size untouched; callers detect the failure by
    comparing `size` with the size they asked for.

    Parameters
    ----------
    data : bytes-like, optional
        Initial contents.

    max_size : int, optional
        Largest logical size the buffer may grow to.  Resizes beyond it
        fail as if memory had run out.
    """

    def __init__(self, data=b"", max_size=None):
        initial = np.frombuffer(bytes(data), dtype=np.uint8)
        self._array = initial.copy()
        self._size = len(initial)
        self._granularity = 4096
        self.max_size = max_size

    @property
    def size(self):
        """
        The logical size of the buffer, in bytes.
        """
        return self._size

    @property
    def capacity(self):
        """
        The number of bytes currently allocated.
        """
        return len(self._array)

    @property
    def granularity(self):
        return self._granularity

    @granularity.setter
    def granularity(self, value):
        if value <= 0:
            msg = f"granularity ({value}) must be > 0"
            raise ValueError(msg)
        self._granularity = value

    def resize(self, size):
        """
        Change the logical size of the buffer.  Bytes that become part
        of the buffer are zeroed.

        Returns
        -------
        int
            The new logical size, which is unchanged from before if the
            resize failed.
        """
        if size < 0:
            msg = f"size ({size}) must be >= 0"
            raise ValueError(msg)

        if self.max_size is not None and size > self.max_size:
            return self._size

        if size > len(self._array):
            capacity = -(-size // self._granularity) * self._granularity
            try:
                grown = np.zeros(capacity, dtype=np.uint8)
            except MemoryError:
                return self._size
            grown[: self._size] = self._array[: self._size]
            self._array = grown
        elif size > self._size:
            self._array[self._size : size] = 0

        self._size = size
        return self._size

    def get(self):
        """
        Return a writable ``uint8`` view of the logical contents.
        """
        return self._array[: self._size]

    def append(self, data):
        """
        Grow the buffer by ``len(data)`` and copy ``data`` into the new
        space.

        Returns
        -------
        bool
            `False` if the buffer could not grow.
        """
        data = np.frombuffer(bytes(data), dtype=np.uint8)
        old_size = self._size
        new_size = old_size + len(data)
        if self.resize(new_size) != new_size:
            return False
        self._array[old_size:new_size] = data
        return True

    def tobytes(self):
        """
        Return a copy of the logical contents as `bytes`.
        """
        return self.get().tobytes()

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"<GrowableBuffer size={self._size} capacity={self.capacity}>"
