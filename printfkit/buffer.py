"""Character buffer that collects formatted output."""

from __future__ import annotations

import os

from printfkit.spec import INT_MAX, FormatError


class OutputBuffer:
    """Accumulates output characters, refusing to grow past a limit.

    The default limit is INT_MAX characters, the largest count a print
    function can report.
    """

    def __init__(self, limit: int = INT_MAX) -> None:
        self._chars: list[str] = []
        self._limit = limit

    def __len__(self) -> int:
        return len(self._chars)

    def add(self, char: str) -> None:
        """Append a single character."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if len(self._chars) >= self._limit:
            raise FormatError("output too long")
        self._chars.append(char)

    def add_text(self, text: str) -> None:
        """Append every character of text, one at a time."""
        for char in text:
            self.add(char)

    def fill(self, amount: int, filler: str) -> None:
        """Append filler amount times; a non-positive amount adds nothing."""
        for _ in range(max(amount, 0)):
            self.add(filler)

    def to_string(self) -> str:
        """Return the whole content."""
        return "".join(self._chars)

    def truncated(self, size: int) -> str:
        """Return what fits in a buffer of size bytes, terminator included.

        A size of zero yields an empty string.
        """
        if size <= 0:
            return ""
        return "".join(self._chars[:size - 1])

    def write_to(self, fd: int) -> int:
        """Write the content to a file descriptor and return its length.

        Raises OSError if the write is short.
        """
        data = self.to_string().encode("utf-8")
        if not data:
            os.write(fd, b"")
            return 0
        written = os.write(fd, data)
        if written != len(data):
            raise OSError(f"short write: {written} of {len(data)} bytes")
        return len(self._chars)