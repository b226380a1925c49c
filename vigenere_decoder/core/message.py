"""Message: ordered container of ASCII text lines.

Invariants:
    - Line order is insertion order
    - Every stored line is a str made only of ASCII characters
    - get_line accepts only indexes in [0, line_count()); no negative indexing
    - str(message) joins lines with "\\n"
"""

from collections.abc import Iterable, Iterator

from vigenere_decoder.core.errors import InvalidArgumentError, OutOfRangeError, ErrorContext


class Message:
    """Ordered list of ASCII lines. Not safe for concurrent mutation."""

    def __init__(self, lines: Iterable[str] | None = None):
        self._lines: list[str] = []
        if lines is not None:
            for line in lines:
                self.append_line(line)

    @classmethod
    def from_text(cls, text: str) -> "Message":
        """Build a message from a text block split on "\\n" only.

        A trailing "\\r" is dropped from each line (CRLF input) and one final
        empty line after a trailing "\\n" is ignored. Other ASCII separators
        such as "\\x0b" or "\\x1c" stay inside the line: ciphertext may
        use any code in [0, 127].
        """
        if text is None:
            raise InvalidArgumentError("Text must not be None", argument="text")
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return cls(line[:-1] if line.endswith("\r") else line for line in lines)

    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        if (
            isinstance(index, bool)
            or not isinstance(index, int)
            or not 0 <= index < len(self._lines)
        ):
            raise OutOfRangeError(index, len(self._lines))
        return self._lines[index]

    def append_line(self, line: str) -> None:
        if line is None:
            raise InvalidArgumentError("Line must not be None", argument="line")
        if not isinstance(line, str):
            raise InvalidArgumentError(
                f"Line must be a str, got {type(line).__name__}", argument="line",
            )
        if not line.isascii():
            raise InvalidArgumentError(
                "Line contains non-ASCII characters",
                argument="line",
                context=ErrorContext(line_index=len(self._lines)),
            )
        self._lines.append(line)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return self._lines == other._lines

    def __repr__(self) -> str:
        return f"Message({self._lines!r})"

    def __str__(self) -> str:
        return "\n".join(self._lines)
