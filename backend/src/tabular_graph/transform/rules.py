"""Attribute rule parser: "A+B: color = red, shape = box"."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Sequence

from .descriptor import CONCAT_MARKER
from .errors import MalformedAttributeRule, MissingColumn

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"[\w+]+")
_PLUS_SPACE_RE = re.compile(r"\s*\+\s*")


@dataclass(frozen=True)
class AttributeRule:
    """Target tag plus ordered (attribute, value) pairs."""

    target_tag: str
    pairs: tuple[tuple[str, str], ...]

    @property
    def columns(self) -> list[str]:
        return self.target_tag.split(CONCAT_MARKER)


def normalize_whitespace(text: str) -> str:
    return " ".join(text.split())


def _unquote(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1].replace('\\"', '"')
    return value


def _split_pairs(body: str) -> list[str]:
    """Split on commas that are not inside a double-quoted value."""
    parts = []
    current: list[str] = []
    in_quote = False
    for c in body:
        if c == '"' and (not current or current[-1] != "\\"):
            in_quote = not in_quote
            current.append(c)
        elif c == "," and not in_quote:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(c)
    parts.append("".join(current).strip())
    return [p for p in parts if p]


def parse_rule(text: str, strict: bool = False) -> AttributeRule:
    """Parse one rule string into an AttributeRule.

    A pair without "=" is kept with an empty value unless strict is set.
    """
    normalized = normalize_whitespace(text or "")
    head, sep, body = normalized.partition(":")
    if not sep:
        raise MalformedAttributeRule(normalized, "expected '<tag>: <name>=<value>, ...'")
    tag = _PLUS_SPACE_RE.sub(CONCAT_MARKER, head.strip())
    if not tag or not _TAG_RE.fullmatch(tag):
        raise MalformedAttributeRule(normalized, f"invalid tag {head.strip()!r}")

    pairs: list[tuple[str, str]] = []
    for part in _split_pairs(body):
        name, eq, value = part.partition("=")
        name = name.strip()
        if not eq:
            if strict:
                raise MalformedAttributeRule(normalized, f"pair {part!r} has no '='")
            logger.warning("Attribute pair %r in rule %r has no '='; using empty value", part, normalized)
            pairs.append((part, ""))
            continue
        if not name:
            raise MalformedAttributeRule(normalized, f"pair {part!r} has no attribute name")
        pairs.append((name, _unquote(value.strip())))

    if not pairs:
        raise MalformedAttributeRule(normalized, "no attribute pairs")
    return AttributeRule(target_tag=tag, pairs=tuple(pairs))


def parse_rules(specs: str | Sequence[str] | None, strict: bool = False) -> list[AttributeRule]:
    if specs is None:
        return []
    if isinstance(specs, str):
        specs = [specs]
    return [parse_rule(s, strict=strict) for s in specs]


def validate_node_rules(
    rules: Sequence[AttributeRule],
    columns: Sequence[str],
    node_tags: Sequence[str] = (),
) -> None:
    """Node rule tags must name table columns; tags matching no node group are only logged."""
    for rule in rules:
        for c in rule.columns:
            if c not in columns:
                raise MissingColumn(c, f"node attribute rule for {rule.target_tag!r}")
        if node_tags and rule.target_tag not in node_tags:
            logger.warning("Node attribute rule %r matches no node group %s", rule.target_tag, list(node_tags))
