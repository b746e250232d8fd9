"""Immutable cursor infrastructure for backtracking parsers.

Implements the immutable cursor pattern that every parser in the engine
threads from one call to the next.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Every advance() returns NEW cursor, so a failed branch can never
      leave a partially consumed input behind (backtracking is free)
    - The "remaining input" is a view (source, pos), never a copied tail
    - Line:column computed on-demand (O(n) only for error reporting)

Line Ending Support:
    Line numbers use \\n as the line delimiter. CRLF input works because
    the \\n is still present. CR-only input reports a single line.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable view of the unconsumed input.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (a cursor is created per step)
        3. Simple position - Just an integer offset into an unchanging source
        4. EOF is a property - Not a return value

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance(2).remaining
        'llo'
        >>> cursor.remaining  # Original unchanged (immutability)
        'hello'
    """

    source: str
    pos: int = 0

    @classmethod
    def of(cls, text: "str | Cursor") -> "Cursor":
        """Coerce a string or an existing cursor to a cursor.

        Strings start at position 0; cursors are returned unchanged.
        """
        if isinstance(text, Cursor):
            return text
        return cls(text, 0)

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input. Check is_eof first in parsers.
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    @property
    def remaining(self) -> str:
        """The unconsumed tail of the source.

        This copies the tail; parsers should work with pos and
        startswith()/slice_ahead() instead and leave remaining to callers.
        """
        return self.source[self.pos :]

    @property
    def remaining_length(self) -> int:
        """Number of characters left to consume."""
        return len(self.source) - self.pos

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        The new position is clamped to the end of the source, so a cursor
        can never point past EOF.

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor2 = cursor.advance()
            >>> cursor.pos  # Original unchanged
            0
            >>> cursor2.pos
            1
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def startswith(self, prefix: str) -> bool:
        """Check whether the unconsumed input starts with prefix (no copy)."""
        return self.source.startswith(prefix, self.pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        May return fewer characters if near EOF.

        Example:
            >>> Cursor("hello", 0).slice_ahead(3)
            'hel'
            >>> Cursor("hello", 0).slice_ahead(10)
            'hello'
        """
        return self.source[self.pos : self.pos + n]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position.
            Only call for error reporting, not during normal parsing!

        Example:
            >>> source = "line1\\nline2\\nline3"
            >>> Cursor(source, 0).compute_line_col()
            (1, 1)
            >>> Cursor(source, 8).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def format_context(self, message: str, context_lines: int = 2) -> str:
        """Format a message with line:column, source context and a caret.

        Args:
            message: Error description
            context_lines: Number of lines to show before/after the cursor line

        Returns:
            Multi-line formatted error with context

        Example:
            >>> print(Cursor("a = 1\\nb = +", 10).format_context("Expected value"))
            2:5: Expected value
            <BLANKLINE>
               1 | a = 1
               2 | b = +
                 |     ^
        """
        line, col = self.compute_line_col()
        lines = self.source.split("\n")

        result_lines = [f"{line}:{col}: {message}", ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])
            if i == line:
                gutter = " " * (len(line_num_str) - 2) + "| "
                result_lines.append(gutter + " " * (col - 1) + "^")

        return "\n".join(result_lines)

