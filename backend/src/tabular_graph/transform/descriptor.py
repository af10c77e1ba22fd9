"""Relationship descriptor parser: "A -> B", "A+B -- C"."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Sequence, Union

from .errors import InvalidDescriptor, MissingColumn

logger = logging.getLogger(__name__)

DIRECTED_OP = "->"
UNDIRECTED_OP = "--"
CONCAT_MARKER = "+"
SYNTHETIC_SEPARATOR = "__"

_OP_RE = re.compile(r"->|--")


@dataclass(frozen=True)
class Side:
    """One side of a relationship: a single column or several joined columns."""

    columns: tuple[str, ...]

    @property
    def tag(self) -> str:
        return CONCAT_MARKER.join(self.columns)

    @property
    def is_composite(self) -> bool:
        return len(self.columns) > 1

    def identity(self, row: Mapping[str, str]) -> str:
        """Raw (unsanitized) identity of this side for a row."""
        if not self.is_composite:
            return row.get(self.columns[0], "")
        return SYNTHETIC_SEPARATOR.join(row.get(c, "") for c in self.columns)


@dataclass(frozen=True)
class SimpleMode:
    left: Side
    right: Side


@dataclass(frozen=True)
class LeftComposite:
    left: Side
    right: Side


@dataclass(frozen=True)
class RightComposite:
    left: Side
    right: Side


@dataclass(frozen=True)
class BothComposite:
    left: Side
    right: Side


IdentityMode = Union[SimpleMode, LeftComposite, RightComposite, BothComposite]


@dataclass(frozen=True)
class RelationshipDescriptor:
    directed: bool
    left: Side
    right: Side
    mode: IdentityMode

    @property
    def left_columns(self) -> list[str]:
        return list(self.left.columns)

    @property
    def right_columns(self) -> list[str]:
        return list(self.right.columns)


def select_mode(left: Side, right: Side) -> IdentityMode:
    if left.is_composite and right.is_composite:
        return BothComposite(left, right)
    if left.is_composite:
        return LeftComposite(left, right)
    if right.is_composite:
        return RightComposite(left, right)
    return SimpleMode(left, right)


def _parse_side(spec: str, text: str) -> Side:
    names = [name.strip() for name in spec.split(CONCAT_MARKER)]
    if not names or any(not n for n in names):
        raise InvalidDescriptor(f"Empty column name in relationship side {spec.strip()!r} of {text!r}")
    return Side(columns=tuple(names))


def _check_columns(side: Side, columns: Sequence[str], text: str) -> Side:
    """Validate a side against the table; composite parts follow table column order."""
    known = [c for c in side.columns if c in columns]
    if not known:
        raise InvalidDescriptor(
            f"None of the columns {list(side.columns)} in {text!r} exist in the table"
        )
    for c in side.columns:
        if c not in columns:
            raise MissingColumn(c, f"relationship {text!r}")
    return Side(columns=tuple(c for c in columns if c in side.columns))


def parse_descriptor(text: str, columns: Sequence[str] | None = None) -> RelationshipDescriptor:
    """Parse "<left> -> <right>" or "<left> -- <right>".

    Each side is one column name or several joined with "+". When columns is
    given, every referenced name must be one of them and a composite side is
    reordered to match the table ("B+A" over columns A, B becomes "A+B").
    """
    if not text or not text.strip():
        raise InvalidDescriptor("Empty relationship descriptor")
    ops = _OP_RE.findall(text)
    if not ops:
        raise InvalidDescriptor(
            f"No relationship operator ('{DIRECTED_OP}' or '{UNDIRECTED_OP}') in {text!r}"
        )
    if len(ops) > 1:
        raise InvalidDescriptor(f"Expected exactly one relationship operator in {text!r}")

    left_spec, right_spec = _OP_RE.split(text, maxsplit=1)
    left = _parse_side(left_spec, text)
    right = _parse_side(right_spec, text)
    if columns is not None:
        left = _check_columns(left, columns, text)
        right = _check_columns(right, columns, text)

    mode = select_mode(left, right)
    logger.debug(
        "Parsed relationship %r: %s %s %s (%s)",
        text,
        left.tag,
        ops[0],
        right.tag,
        type(mode).__name__,
    )
    return RelationshipDescriptor(directed=ops[0] == DIRECTED_OP, left=left, right=right, mode=mode)
