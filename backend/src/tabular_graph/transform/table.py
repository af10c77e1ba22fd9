"""Table model: ordered columns, rows of string cells."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence


def _cell(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass
class Table:
    """Input table. Every row carries every column; absent cells read as ""."""

    columns: list[str] = field(default_factory=list)
    rows: list[dict[str, str]] = field(default_factory=list)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        columns: Sequence[str] | None = None,
    ) -> Table:
        """Build from row mappings. Column order is explicit or first-seen key order."""
        records = list(records)
        if columns is None:
            seen: dict[str, None] = {}
            for rec in records:
                for key in rec:
                    seen.setdefault(str(key), None)
            cols = list(seen)
        else:
            cols = [str(c) for c in columns]
        rows = [{c: _cell(rec.get(c)) for c in cols} for rec in records]
        return cls(columns=cols, rows=rows)

    @classmethod
    def from_columns(cls, data: Mapping[str, Sequence[Any]]) -> Table:
        cols = [str(c) for c in data]
        lengths = {len(v) for v in data.values()}
        if len(lengths) > 1:
            raise ValueError(f"Columns have different lengths: {sorted(lengths)}")
        n = lengths.pop() if lengths else 0
        rows = [{c: _cell(data[c][i]) for c in cols} for i in range(n)]
        return cls(columns=cols, rows=rows)

    def __len__(self) -> int:
        return len(self.rows)
