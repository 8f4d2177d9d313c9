from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterator, Tuple

from seid.token import Token
from seid.util import Span


@dataclass
class Node:
    span: Span = field(repr=False, kw_only=True, compare=False, default=None)

    def __str__(self) -> str:
        from seid.tree.printer import AstPrinter

        printer = AstPrinter()
        return printer.print(self)

    def __contains__(self, element: Node) -> bool:
        if self == element:
            return True
        return any(
            isinstance(child, Node) and element in child
            for field_name, child in self.iter_fields()
        )

    def iter_fields(self) -> Iterator[Tuple[str, Node | Token]]:
        # Yield the dataclass fields, apart from the location information
        for _field in fields(self):
            if _field.name != "span":
                yield _field.name, getattr(self, _field.name)


@dataclass
class LiteralNode(Node):
    value: float | str | bool | None


@dataclass
class UnaryNode(Node):
    operator: Token
    operand: Node


@dataclass
class BinaryNode(Node):
    left: Node
    operator: Token
    right: Node


@dataclass
class GroupingNode(Node):
    expression: Node
