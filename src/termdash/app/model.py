"""Domain records shown by the dashboard.

Parsing is tolerant: missing or mistyped fields fall back to empty values so
a partially broken payload still renders.
"""

from __future__ import annotations

from dataclasses import dataclass

JsonDict = dict[str, object]


@dataclass(frozen=True)
class Entry:
    id: str
    title: str
    status: str = ""
    value: float | None = None
    updated: str = ""

    @property
    def is_stale(self) -> bool:
        return self.status == "stale"


@dataclass(frozen=True)
class EntryDetail:
    id: str
    title: str
    fields: tuple[tuple[str, str], ...] = ()
    notes: tuple[str, ...] = ()

    def lines(self) -> tuple[str, ...]:
        """Flattened text lines, as the detail panel displays them."""
        width = max((len(key) for key, _ in self.fields), default=0)
        out = [self.title, ""]
        out.extend(f"{key.ljust(width)}  {value}" for key, value in self.fields)
        if self.notes:
            out.append("")
            out.extend(self.notes)
        return tuple(out)


def _as_float(raw: object) -> float | None:
    if isinstance(raw, bool) or raw is None:
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        return None


def parse_entry(data: JsonDict) -> Entry:
    return Entry(
        id=str(data.get("id", "")),
        title=str(data.get("title", "") or ""),
        status=str(data.get("status", "") or ""),
        value=_as_float(data.get("value")),
        updated=str(data.get("updated", "") or ""),
    )


def parse_entries(payload: object) -> tuple[Entry, ...]:
    """Accept either a bare list or {"entries": [...]}; skip non-objects and id-less rows."""
    if isinstance(payload, dict):
        payload = payload.get("entries", [])
    if not isinstance(payload, list):
        raise ValueError("entries payload must be a list")
    entries = (parse_entry(item) for item in payload if isinstance(item, dict))
    return tuple(entry for entry in entries if entry.id)


def parse_detail(payload: object) -> EntryDetail:
    if not isinstance(payload, dict):
        raise ValueError("detail payload must be an object")
    raw_fields = payload.get("fields", {})
    if isinstance(raw_fields, dict):
        fields = tuple((str(k), str(v)) for k, v in raw_fields.items())
    else:
        fields = ()
    raw_notes = payload.get("notes", [])
    notes = tuple(str(n) for n in raw_notes) if isinstance(raw_notes, list) else ()
    return EntryDetail(
        id=str(payload.get("id", "")),
        title=str(payload.get("title", "") or ""),
        fields=fields,
        notes=notes,
    )
