"""Line-by-line reading from a raw file descriptor."""

import os

DEFAULT_BUFFER_SIZE = 10_000_000


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Data is pulled from the descriptor in chunks of at most ``buffer_size``
    bytes.  Whatever follows the returned line stays buffered in the reader
    for the next call, so separate readers on separate descriptors can be
    used in any interleaved order without disturbing one another.
    """

    def __init__(self, fd, buffer_size=DEFAULT_BUFFER_SIZE):
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError("fd must be an integer file descriptor")
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def readline(self):
        """Return the next line including its newline, or ``None`` at end of input.

        The final line is returned without a newline if the input does not
        end with one.  A failing read raises ``OSError``; bytes already taken
        from earlier chunks for the current line are then discarded.
        """
        parts = []
        while True:
            if not self._pending:
                chunk = os.read(self.fd, self.buffer_size)
                if not chunk:
                    return b"".join(parts) if parts else None
                self._pending = chunk
            end = self._pending.find(b"\n")
            if end >= 0:
                parts.append(self._pending[:end + 1])
                self._pending = self._pending[end + 1:]
                return b"".join(parts)
            parts.append(self._pending)
            self._pending = b""

    def __iter__(self):
        return self

    def __next__(self):
        line = self.readline()
        if line is None:
            raise StopIteration
        return line