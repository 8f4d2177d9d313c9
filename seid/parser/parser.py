"""
Recursive descent parser for Seid expressions.

Expression grammar, from loosest to tightest binding:

expression → equality
equality   → comparison ( ( "!=" | "==" ) comparison )*
comparison → term ( ( ">" | ">=" | "<" | "<=" ) term )*
term       → factor ( ( "-" | "+" ) factor )*
factor     → unary ( ( "/" | "*" ) unary )*
unary      → ( "-" | "!" ) unary | primary
primary    → NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"
"""
from typing import Callable, List

from seid.error.error import ExpressionTooDeepError
from seid.token import Token
from seid.type import Type
from seid.util import Span

from seid.tree.tree import (  # isort:skip
    BinaryNode,
    GroupingNode,
    LiteralNode,
    Node,
    UnaryNode,
)
from seid.error.parser_error import (  # isort:skip
    ExpectedExpressionError,
    ParserException,
    UnclosedBracketError,
    UnexpectedTokenError,
)


class Parser:
    def __init__(self, tokens: List[Token], program: str = "") -> None:
        self.og_program = program

        # Treat a token list without a trailing EOF as if it had one
        if not tokens or tokens[-1].type != Type.EOF:
            last_span = tokens[-1].span if tokens else Span.default()
            eof_span = Span(last_span.end_ln, (last_span.end_col, last_span.end_col))
            tokens = [*tokens, Token("", Type.EOF, span=eof_span)]
        self.tokens = tokens
        # Index of the next token to be consumed
        self.current = 0

    def parse(self) -> Node:
        """Apply the expression grammar to the tokens passed to `Parser(tokens)`,
        producing the tree of a single expression that spans all tokens.

        Parsing stops at the first error, no attempt is made to recover from it.

        Raises:
            ParserException: On the first malformed expression, a missing closing
                bracket, tokens left over after the expression, or nesting deeper
                than the interpreter stack allows.

        Returns:
            Node: The root of the expression tree.
        """
        self.current = 0
        try:
            tree = self.expression()
        except RecursionError:
            raise ParserException(
                ExpressionTooDeepError(self.og_program, self.peek().span)
            ) from None
        if not self.is_at_end():
            raise ParserException(
                UnexpectedTokenError(self.og_program, self.peek().span, self.peek())
            )
        return tree

    def expression(self) -> Node:
        return self.equality()

    def equality(self) -> Node:
        return self.left_associative(self.comparison, Type.BANG_EQUAL, Type.EQUAL_EQUAL)

    def comparison(self) -> Node:
        return self.left_associative(
            self.term,
            Type.GREATER,
            Type.GREATER_EQUAL,
            Type.LESS,
            Type.LESS_EQUAL,
        )

    def term(self) -> Node:
        return self.left_associative(self.factor, Type.MINUS, Type.PLUS)

    def factor(self) -> Node:
        return self.left_associative(self.unary, Type.SLASH, Type.STAR)

    def left_associative(self, operand: Callable[[], Node], *operators: Type) -> Node:
        # Fold `a op b op c` into `(a op b) op c`
        expr = operand()
        while self.match_any(*operators):
            operator = self.previous()
            right = operand()
            expr = BinaryNode(expr, operator, right, span=expr.span & right.span)
        return expr

    def unary(self) -> Node:
        if self.match_any(Type.BANG, Type.MINUS):
            operator = self.previous()
            operand = self.unary()
            return UnaryNode(operator, operand, span=operator.span & operand.span)

        return self.primary()

    def primary(self) -> Node:
        token = self.peek()
        match token.type:
            case Type.FALSE:
                value = False
            case Type.TRUE:
                value = True
            case Type.NIL:
                value = None
            case Type.NUMBER | Type.STRING:
                value = token.literal

            case Type.LEFT_PAREN:
                self.advance()
                expr = self.expression()
                closing = self.consume(Type.RIGHT_PAREN, opening=token)
                return GroupingNode(expr, span=token.span & closing.span)

            case _:
                raise ParserException(
                    ExpectedExpressionError(self.og_program, token.span, token)
                )

        self.advance()
        return LiteralNode(value, span=token.span)

    def consume(self, _type: Type, opening: Token) -> Token:
        if self.check(_type):
            return self.advance()

        got = self.peek()
        raise ParserException(
            UnclosedBracketError(self.og_program, got.span, got, opening)
        )

    def match_any(self, *types: Type) -> bool:
        for _type in types:
            if self.check(_type):
                self.advance()
                return True
        return False

    def check(self, _type: Type) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type == _type

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self) -> bool:
        return self.peek().type == Type.EOF

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]


def parse(tokens: List[Token], program: str = "") -> Node:
    """Parse a list of Tokens, as produced by `tokenize`, into an expression tree."""
    return Parser(tokens, program).parse()
