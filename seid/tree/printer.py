from enum import Enum, auto
from typing import Iterator, Optional

from seid.error.error import ExpressionTooDeepError, SeidSyntaxError
from seid.token import Token
from seid.tree.visitor import NodeVisitor, YieldVisitor
from seid.type import Type
from seid.util import Span, format_number, format_value, operator_precedence

from seid.tree.tree import (  # isort:skip
    BinaryNode,
    GroupingNode,
    LiteralNode,
    Node,
    UnaryNode,
)


class AstPrinter(NodeVisitor):
    """Render a tree in a fully parenthesized prefix form, for debugging.

    >>> from seid import parse, tokenize
    >>> AstPrinter().print(parse(tokenize("1 + 2 * 3")))
    '( + 1 ( * 2 3))'
    """

    def print(self, tree: Node, program: str = "") -> str:
        try:
            return self.visit(tree)
        except RecursionError:
            raise too_deep(tree, program) from None

    def visit_LiteralNode(self, node: LiteralNode) -> str:
        return format_value(node.value)

    def visit_UnaryNode(self, node: UnaryNode) -> str:
        return f"( {node.operator.text} {self.visit(node.operand)})"

    def visit_BinaryNode(self, node: BinaryNode) -> str:
        return f"( {node.operator.text} {self.visit(node.left)} {self.visit(node.right)})"

    def visit_GroupingNode(self, node: GroupingNode) -> str:
        return f"( group {self.visit(node.expression)})"


class PrintingInfo(Enum):
    SPACE = auto()


class SourcePrinter(YieldVisitor):
    """Render a tree back into a program, which parses into an equal tree."""

    def print(self, tree: Node, program: str = "") -> str:
        output = ""
        try:
            for token in self.visit(tree):
                if token == PrintingInfo.SPACE:
                    output += " "
                else:
                    output += token.text
        except RecursionError:
            raise too_deep(tree, program) from None
        return output

    def visit_LiteralNode(self, node: LiteralNode, **kwargs) -> Iterator[Token]:
        match node.value:
            case True:
                yield Token("true", Type.TRUE)
            case False:
                yield Token("false", Type.FALSE)
            case None:
                yield Token("nil", Type.NIL)
            case float() | int():
                value = float(node.value)
                yield Token(format_number(value), Type.NUMBER, value)
            case _:
                yield Token(f'"{node.value}"', Type.STRING, node.value)

    def visit_UnaryNode(self, node: UnaryNode, **kwargs) -> Iterator[Token]:
        if isinstance(node.operand, BinaryNode):
            yield node.operator
            yield Token("(", Type.LEFT_PAREN)
            yield from self.visit(node.operand)
            yield Token(")", Type.RIGHT_PAREN)
        else:
            yield node.operator
            yield from self.visit(node.operand)

    def visit_BinaryNode(
        self,
        node: BinaryNode,
        previous_precedence: Optional[int] = None,
        right: bool = False,
        **kwargs,
    ) -> Iterator[Token]:
        precedence = operator_precedence[node.operator.type]
        # A looser operator below a tighter one needs brackets, and so does an
        # equally tight one on the right, as all operators are left associative
        if previous_precedence and (
            precedence > previous_precedence
            or precedence == previous_precedence
            and right
        ):
            yield Token("(", Type.LEFT_PAREN)
            yield from self.visit_BinaryNode(node)
            yield Token(")", Type.RIGHT_PAREN)
        else:
            yield from self.visit(node.left, previous_precedence=precedence)
            yield PrintingInfo.SPACE
            yield node.operator
            yield PrintingInfo.SPACE
            yield from self.visit(node.right, previous_precedence=precedence, right=True)

    def visit_GroupingNode(self, node: GroupingNode, **kwargs) -> Iterator[Token]:
        yield Token("(", Type.LEFT_PAREN)
        yield from self.visit(node.expression)
        yield Token(")", Type.RIGHT_PAREN)


def too_deep(tree: Node, program: str) -> SeidSyntaxError:
    # Hand-built trees carry no location
    span = tree.span or Span.default()
    return SeidSyntaxError(ExpressionTooDeepError(program, span))
