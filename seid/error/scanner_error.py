from dataclasses import dataclass

from seid.error.error import CompilerError, SeidSyntaxError


class ScannerException(SeidSyntaxError):
    pass


class ScannerError(CompilerError):
    pass


class UnexpectedCharacterError(ScannerError):
    category = "unexpected character"


class UnterminatedStringError(ScannerError):
    category = "unterminated string"
    n_before = 0

    def create_error(self, after: str = "", **kwargs) -> str:
        return super().create_error(
            after or f"The string starting on line {self.span.start_ln} is never closed.",
            **kwargs,
        )


@dataclass
class InvalidEncodingError(ScannerError):
    invalid: bytes

    category = "invalid encoding"

    @property
    def detail(self) -> str:
        return f"{self.invalid!r} is not valid UTF-8"
