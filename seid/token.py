from __future__ import annotations

from dataclasses import dataclass, field

from seid.type import Type
from seid.util import Span

LiteralValue = float | str | None


@dataclass(frozen=True)
class Token:
    text: str
    type: Type = field(repr=False)
    literal: LiteralValue = field(default=None)
    span: Span = field(repr=False, default_factory=Span.default)

    @property
    def line(self) -> int:
        return self.span.end_ln

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Token):
            return False
        return (
            self.text == __o.text
            and self.type == __o.type
            and self.literal == __o.literal
        )

    def __hash__(self) -> int:
        return hash((self.text, self.type))

    def __str__(self) -> str:
        return self.text
