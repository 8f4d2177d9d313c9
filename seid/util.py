from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from seid.type import Type


@dataclass
class Span:
    ln: Tuple[int, int]
    col: Tuple[int, int]

    @property
    def start_ln(self) -> int:
        return self.ln[0]

    @property
    def end_ln(self) -> int:
        return self.ln[1]

    @property
    def start_col(self) -> int:
        return self.col[0]

    @property
    def end_col(self) -> int:
        return self.col[1]

    @property
    def multiline(self) -> bool:
        return self.start_ln != self.end_ln

    @property
    def lines_str(self) -> str:
        if self.multiline:
            return f"lines [{self.start_ln}-{self.end_ln}]"
        return f"line [{self.start_ln}]"

    @classmethod
    def default(cls):
        return cls(-1, (0, -1))

    def __init__(self, line_no: int | Tuple[int, int], span: Tuple[int, int]) -> None:
        if isinstance(line_no, int):
            self.ln = (line_no, line_no)
        else:
            self.ln = line_no
        self.col = span

    def __and__(self, other: Span) -> Span:
        # Determine the correct columns based on the starting line
        if self.start_ln < other.start_ln:
            col = (self.start_col, other.end_col)
        elif self.start_ln > other.start_ln:
            col = (other.start_col, self.end_col)
        else:
            col = (
                min(self.start_col, other.start_col),
                max(self.end_col, other.end_col),
            )

        return Span(
            line_no=(
                min(self.start_ln, other.start_ln),
                max(self.end_ln, other.end_ln),
            ),
            span=col,
        )


# Binding strength of the binary operators, lower binds tighter.
# All of them are left associative.
operator_precedence = {
    Type.BANG_EQUAL: 10,
    Type.EQUAL_EQUAL: 10,
    Type.GREATER: 9,
    Type.GREATER_EQUAL: 9,
    Type.LESS: 9,
    Type.LESS_EQUAL: 9,
    Type.MINUS: 6,
    Type.PLUS: 6,
    Type.SLASH: 5,
    Type.STAR: 5,
}


def format_number(value: float) -> str:
    """Render a number the way it would be written in a program,
    i.e. `3` rather than `3.0`, and `0.00001` rather than `1e-05`."""
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        # repr is exact, so expanding its exponent loses no digits
        text = format(Decimal(text), "f")
    return text


def format_value(value: float | str | bool | None) -> str:
    match value:
        case True:
            return "true"
        case False:
            return "false"
        case None:
            return "nil"
        case float():
            return format_number(value)
    return str(value)


class Colors:
    RED = "\033[31m"
    ENDC = "\033[m"
