"""Errors raised while parsing a relationship descriptor or attribute rules."""

from __future__ import annotations


class GraphSpecError(ValueError):
    """Base class: the descriptor or rules cannot be applied to the table."""


class InvalidDescriptor(GraphSpecError):
    """No usable operator, or a side that references no known column."""


class MissingColumn(GraphSpecError):
    def __init__(self, column: str, context: str = "") -> None:
        self.column = column
        msg = f"Column not found in table: {column!r}"
        if context:
            msg = f"{msg} ({context})"
        super().__init__(msg)


class MalformedAttributeRule(GraphSpecError):
    def __init__(self, rule: str, reason: str) -> None:
        self.rule = rule
        super().__init__(f"Malformed attribute rule {rule!r}: {reason}")
