from dataclasses import dataclass

from seid.error.error import CompilerError, SeidSyntaxError
from seid.token import Token
from seid.type import Type


class ParserException(SeidSyntaxError):
    pass


@dataclass
class ParseError(CompilerError):
    got: Token

    @property
    def got_str(self) -> str:
        if self.got.type == Type.EOF:
            return str(Type.EOF)
        return repr(self.got.text)


class ExpectedExpressionError(ParseError):
    category = "expected expression"

    @property
    def detail(self) -> str:
        return f"got {self.got_str}"


@dataclass
class UnclosedBracketError(ParseError):
    bracket: Token

    category = "expected closing parenthesis"

    @property
    def detail(self) -> str:
        return f"expected {Type.RIGHT_PAREN} after expression, but got {self.got_str}"

    def create_error(self, after: str = "", **kwargs) -> str:
        return super().create_error(
            after or f"The {self.bracket.type} bracket on {self.bracket.span.lines_str} was never closed.",
            **kwargs,
        )


class UnexpectedTokenError(ParseError):
    category = "unexpected token"

    @property
    def detail(self) -> str:
        return f"expected the {Type.EOF} after expression, but got {self.got_str}"
