"""Asynchronous request values and the performer that runs them.

Reducers return Async(<request>) with one of the frozen requests below; the
runtime hands the request to DataEffects.perform on a worker thread, which
always answers with exactly one Action, failures included.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from termdash.app.action import Action, ConfigSaved, DetailLoaded, EffectFailed, EntriesLoaded
from termdash.app.provider import DataProvider
from termdash.io import settings
from termdash.io.settings import Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchEntries:
    request_id: int


@dataclass(frozen=True)
class FetchDetail:
    entry_id: str
    request_id: int


@dataclass(frozen=True)
class SaveConfig:
    config: Config


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class DataEffects:
    def __init__(self, provider: DataProvider, save_config: Callable[[Config], object] = settings.save_config):
        self._provider = provider
        self._save_config = save_config

    def perform(self, request: object) -> Action:
        if isinstance(request, FetchEntries):
            return self._fetch_entries(request)
        if isinstance(request, FetchDetail):
            return self._fetch_detail(request)
        if isinstance(request, SaveConfig):
            return self._save(request)
        return EffectFailed(request, f"unsupported request {type(request).__name__}")

    __call__ = perform

    def _fetch_entries(self, request: FetchEntries) -> Action:
        try:
            entries = self._provider.fetch_entries()
        except Exception as exc:
            logger.warning("fetch_entries failed: %s", exc)
            return EntriesLoaded(request.request_id, error=_describe(exc))
        return EntriesLoaded(request.request_id, entries=tuple(entries))

    def _fetch_detail(self, request: FetchDetail) -> Action:
        try:
            detail = self._provider.fetch_detail(request.entry_id)
        except Exception as exc:
            logger.warning("fetch_detail(%s) failed: %s", request.entry_id, exc)
            return DetailLoaded(request.entry_id, request.request_id, error=_describe(exc))
        return DetailLoaded(request.entry_id, request.request_id, detail=detail)

    def _save(self, request: SaveConfig) -> Action:
        try:
            path = self._save_config(request.config)
        except OSError as exc:
            logger.warning("saving settings failed: %s", exc)
            return ConfigSaved(error=_describe(exc))
        return ConfigSaved(path=str(path or ""))


def effect_failed(request: object, exc: BaseException) -> Action:
    """Failure handler for the scheduler: a raising performer still yields one action."""
    return EffectFailed(request, _describe(exc))
