from string import ascii_letters, digits
from types import MappingProxyType
from typing import List, Optional

from seid.token import LiteralValue, Token
from seid.type import Type
from seid.util import Span

from seid.error.scanner_error import (  # isort:skip
    InvalidEncodingError,
    ScannerException,
    UnexpectedCharacterError,
    UnterminatedStringError,
)

# Reserved words, shared by every Scanner
KEYWORDS = MappingProxyType({_type.value: _type for _type in Type if _type.is_keyword})

DIGITS = frozenset(digits)
IDENTIFIER_START = frozenset(ascii_letters + "_")
IDENTIFIER_CHARS = IDENTIFIER_START | DIGITS


class Scanner:
    def __init__(self, program: str | bytes) -> None:
        if isinstance(program, (bytes, bytearray)):
            program = self.decode(bytes(program))
        self.og_program = program

        self.tokens: List[Token] = []
        # Index of the first character of the current lexeme, and of the next
        # character to be consumed
        self.start = 0
        self.current = 0
        # Line and column at which the current lexeme starts
        self.start_ln = 1
        self.start_col = 0
        self.line = 1
        # Index of the first character of the current line
        self.line_start = 0

    def scan(self) -> List[Token]:
        """Extract the list of tokens from the program passed to `Scanner(program)`.

        The program is read left to right in a single pass. Whitespace and
        comments are skipped, and the list always ends with exactly one EOF token.

        Raises:
            ScannerException: On the first unexpected character or unterminated string.

        Returns:
            List[Token]: A list of Token instances
        """
        self.tokens = []
        self.current = 0
        self.line = 1
        self.line_start = 0

        while not self.is_at_end():
            self.start_lexeme()
            self.scan_token()

        self.start_lexeme()
        self.add_token(Type.EOF)
        return self.tokens

    def scan_token(self) -> None:
        char = self.advance()
        match char:
            case "(" | ")" | "{" | "}" | "," | "." | "-" | "+" | ";" | "*":
                self.add_token(Type(char))

            # Prefer the two character operator if possible, e.g. '==' over '='
            case "!" | "=" | "<" | ">":
                self.add_token(Type(char + "=") if self.match("=") else Type(char))

            case "/":
                if self.match("/"):
                    # A comment goes until the end of the line
                    while self.peek() != "\n" and not self.is_at_end():
                        self.advance()
                else:
                    self.add_token(Type.SLASH)

            case " " | "\r" | "\t":
                pass

            case "\n":
                self.newline()

            case '"':
                self.string()

            case _ if char in DIGITS:
                self.number()

            case _ if char in IDENTIFIER_START:
                self.identifier()

            case _:
                raise ScannerException(
                    UnexpectedCharacterError(self.og_program, self.span())
                )

    def string(self) -> None:
        while self.peek() != '"' and not self.is_at_end():
            if self.advance() == "\n":
                self.newline()

        if self.is_at_end():
            raise ScannerException(
                UnterminatedStringError(self.og_program, self.span())
            )

        # The closing quote
        self.advance()

        # Trim the surrounding quotes
        self.add_token(Type.STRING, self.og_program[self.start + 1 : self.current - 1])

    def number(self) -> None:
        while self.peek() in DIGITS:
            self.advance()

        # Only consume the '.' if a fractional part follows it
        if self.peek() == "." and self.peek_next() in DIGITS:
            self.advance()
            while self.peek() in DIGITS:
                self.advance()

        self.add_token(Type.NUMBER, float(self.lexeme))

    def identifier(self) -> None:
        while self.peek() in IDENTIFIER_CHARS:
            self.advance()

        text = self.lexeme
        keyword = KEYWORDS.get(text)
        if keyword:
            self.add_token(keyword)
        else:
            self.add_token(Type.IDENTIFIER, text)

    def is_at_end(self) -> bool:
        return self.current >= len(self.og_program)

    def advance(self) -> str:
        self.current += 1
        return self.og_program[self.current - 1]

    def match(self, expected: str) -> bool:
        if self.peek() != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return ""
        return self.og_program[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.og_program):
            return ""
        return self.og_program[self.current + 1]

    def newline(self) -> None:
        self.line += 1
        self.line_start = self.current

    def start_lexeme(self) -> None:
        self.start = self.current
        self.start_ln = self.line
        self.start_col = self.current - self.line_start

    @property
    def lexeme(self) -> str:
        return self.og_program[self.start : self.current]

    def span(self) -> Span:
        return Span((self.start_ln, self.line), (self.start_col, self.current - self.line_start))

    def add_token(self, _type: Type, literal: Optional[LiteralValue] = None) -> None:
        self.tokens.append(Token(self.lexeme, _type, literal, self.span()))

    @staticmethod
    def decode(program: bytes) -> str:
        try:
            return program.decode("utf8")
        except UnicodeDecodeError as e:
            text = program[: e.start].decode("utf8")
            line_no = text.count("\n") + 1
            col = len(text) - (text.rfind("\n") + 1)
            raise ScannerException(
                InvalidEncodingError(
                    program.decode("utf8", errors="replace"),
                    Span(line_no, (col, col + 1)),
                    program[e.start : e.end],
                )
            ) from e


def tokenize(source: str | bytes) -> List[Token]:
    """Scan `source` into a list of Tokens, ending with a single EOF token."""
    return Scanner(source).scan()
