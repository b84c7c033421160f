from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextPosition:
    """
    1-based line/column position in script text.

    Invariant:
    - line >= 1 and column >= 1

    Columns count characters, a tab is one column.
    """

    line: int
    column: int

    def __post_init__(self):
        if self.line < 1 or self.column < 1:
            raise ValueError("TextPosition line and column are 1-based")

    @staticmethod
    def start() -> "TextPosition":
        """Position of the first character of a source."""
        return TextPosition(1, 1)

    def as_tuple(self) -> tuple[int, int]:
        return (self.line, self.column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"TextPosition({self.line}, {self.column})"

