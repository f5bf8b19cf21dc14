"""Header presence checkers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, AnyStr

from fileheader.exceptions import BinaryDetected


class HeaderChecker(ABC):
    """Checks for headers in files, like licenses or author attribution.

    This is intended to be used through ``Header`` and ``HeaderEngine``,
    not called directly. Implementations must be safe to share between
    threads.
    """

    @abstractmethod
    def check(self, stream: IO[AnyStr]) -> bool:
        """Return ``True`` if the stream has the desired header.

        Raises ``BinaryDetected`` if the inspected part is not UTF-8 text.
        """


class SingleLineChecker(HeaderChecker):
    """Checks for a pattern in the first several lines of each file."""

    def __init__(self, pattern: str, max_lines: int):
        self.pattern = pattern
        self.max_lines = max_lines

    def __repr__(self) -> str:
        return f"SingleLineChecker(pattern={self.pattern!r}, max_lines={self.max_lines})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SingleLineChecker):
            return NotImplemented
        return (self.pattern, self.max_lines) == (other.pattern, other.max_lines)

    def __hash__(self) -> int:
        return hash((self.pattern, self.max_lines))

    def check(self, stream: IO[AnyStr]) -> bool:
        lines_read = 0
        # only read the first bit of the file
        while lines_read < self.max_lines:
            try:
                line = stream.readline()
                if isinstance(line, bytes):
                    line = line.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise BinaryDetected(str(exc)) from exc
            if not line:
                return False
            lines_read += 1
            if self.pattern in line:
                return True
        return False
