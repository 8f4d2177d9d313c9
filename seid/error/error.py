from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from seid.error.communicator import Communicator
from seid.util import Colors, Span


# Python exceptions to differentiate the stage in which errors are thrown
class SeidException(Exception):
    pass


class UsageError(SeidException):
    pass


class SeidSyntaxError(SeidException):
    """Raised on the first malformed construct found while scanning or parsing.

    Carries the diagnostic that caused it, so the caller may render the
    offending source with `error.create_error()`.
    """

    def __init__(self, error: CompilerError) -> None:
        super().__init__(error)
        self.error = error

    @property
    def line(self) -> int:
        return self.error.line

    @property
    def category(self) -> str:
        return self.error.category

    @property
    def detail(self) -> str:
        return self.error.detail

    def __str__(self) -> str:
        return self.error.header


@dataclass
class CompilerError:
    program: str
    span: Span

    category: ClassVar[str] = "error"
    n_before: ClassVar[int] = 1
    n_after: ClassVar[int] = 1

    @property
    def line(self) -> int:
        return self.span.end_ln

    @property
    def detail(self) -> str:
        return repr(self.error_chars)

    @property
    def header(self) -> str:
        return f"[line {self.line}] Error {self.category}: {self.detail}"

    def create_error(self, after: str = "", color: Optional[str] = Colors.RED) -> str:
        return Communicator.create_message(
            self.program,
            self.span,
            self.header,
            after,
            self.n_before,
            self.n_after,
            color,
        )

    # Give the characters that caused the error to be thrown
    @property
    def error_chars(self) -> str:
        lines = self.program.split("\n")
        if not 1 <= self.span.start_ln <= len(lines):
            return ""

        error_lines = lines[self.span.start_ln - 1 : self.span.end_ln]
        error_lines[-1] = error_lines[-1][: self.span.end_col]
        error_lines[0] = error_lines[0][self.span.start_col :]
        return "\n".join(error_lines)

    def __str__(self) -> str:
        return self.create_error()


class ExpressionTooDeepError(CompilerError):
    category = "expression nested too deeply"

    @property
    def detail(self) -> str:
        return f"the expression on {self.span.lines_str} exceeds the maximum nesting depth"
