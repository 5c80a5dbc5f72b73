"""Data sources for the entry feed.

HttpDataProvider talks JSON over HTTP:
    GET {base_url}/entries          -> [{"id", "title", "status", "value", "updated"}, ...]
    GET {base_url}/entries/{id}     -> {"id", "title", "fields": {...}, "notes": [...]}

FixtureProvider produces deterministic demo data and can be told to fail a
fraction of calls, which is how the error paths are exercised by hand.
Both are called from effect worker threads and hold no shared mutable state
beyond the fixture's RNG, which is guarded by a lock.
"""

from __future__ import annotations

import json
import random
import threading
import time
import urllib.error
import urllib.parse
import urllib.request
from typing import Protocol

from termdash.app.model import Entry, EntryDetail, parse_detail, parse_entries


class DataProvider(Protocol):
    def fetch_entries(self) -> tuple[Entry, ...]: ...

    def fetch_detail(self, entry_id: str) -> EntryDetail: ...


class ProviderError(Exception):
    """Failure talking to a data source; message is user-facing."""


class HttpDataProvider:
    def __init__(self, base_url: str, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get_json(self, path: str) -> object:
        request = urllib.request.Request(
            f"{self.base_url}{path}",
            headers={"accept": "application/json"},
            method="GET",
        )
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                raw = response.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            raise ProviderError(f"HTTP {e.code} {e.reason}") from e
        except urllib.error.URLError as e:
            raise ProviderError(f"network failure: {e.reason}") from e
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ProviderError(f"invalid JSON from {path}") from e

    def fetch_entries(self) -> tuple[Entry, ...]:
        try:
            return parse_entries(self._get_json("/entries"))
        except ValueError as e:
            raise ProviderError(str(e)) from e

    def fetch_detail(self, entry_id: str) -> EntryDetail:
        path = "/entries/" + urllib.parse.quote(entry_id, safe="")
        try:
            return parse_detail(self._get_json(path))
        except ValueError as e:
            raise ProviderError(str(e)) from e


_STATUSES = ("ok", "ok", "ok", "warn", "stale", "error")
_WORDS = ("alpha", "bravo", "cache", "delta", "edge", "feed", "gate", "hub", "index", "job", "kernel", "ledger")


class FixtureProvider:
    def __init__(self, count: int = 40, seed: int = 7, fail_rate: float = 0.0, delay: float = 0.0):
        self.count = count
        self.seed = seed
        self.fail_rate = fail_rate
        self.delay = delay
        self._rng = random.Random(seed)
        self._lock = threading.Lock()
        self._calls = 0

    def _maybe_fail(self, what: str) -> int:
        with self._lock:
            self._calls += 1
            roll = self._rng.random()
            calls = self._calls
        if self.delay:
            time.sleep(self.delay)
        if roll < self.fail_rate:
            raise ProviderError(f"network failure while fetching {what}")
        return calls

    def _entry(self, index: int, generation: int) -> Entry:
        rng = random.Random(self.seed * 1000 + index)
        title = " ".join(rng.choice(_WORDS) for _ in range(3))
        status = rng.choice(_STATUSES)
        value = round(rng.uniform(0, 100) + generation % 5, 2)
        return Entry(
            id=f"e{index:03d}",
            title=title.capitalize(),
            status=status,
            value=value,
            updated=f"{generation:04d}",
        )

    def fetch_entries(self) -> tuple[Entry, ...]:
        generation = self._maybe_fail("entries")
        return tuple(self._entry(i, generation) for i in range(self.count))

    def fetch_detail(self, entry_id: str) -> EntryDetail:
        generation = self._maybe_fail(f"entry {entry_id}")
        try:
            index = int(entry_id.lstrip("e"))
        except ValueError:
            raise ProviderError(f"unknown entry {entry_id}") from None
        if not 0 <= index < self.count:
            raise ProviderError(f"unknown entry {entry_id}")
        entry = self._entry(index, generation)
        rng = random.Random(self.seed * 7919 + index)
        notes = tuple(
            f"{rng.choice(_WORDS)} {rng.choice(_WORDS)} checked at step {step}"
            for step in range(rng.randint(3, 30))
        )
        return EntryDetail(
            id=entry.id,
            title=entry.title,
            fields=(
                ("status", entry.status),
                ("value", f"{entry.value:.2f}"),
                ("updated", entry.updated),
            ),
            notes=notes,
        )
