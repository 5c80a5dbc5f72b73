"""Resolved styles for the dashboard, built from the configured color strings."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from rich.errors import StyleSyntaxError
from rich.style import Style

from termdash.io.settings import DEFAULT_COLORS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Theme:
    accent: Style
    selected: Style
    muted: Style
    error: Style
    status: Style
    border: Style


def _parse(name: str, colors: Mapping[str, str]) -> Style:
    definition = colors.get(name, DEFAULT_COLORS[name])
    try:
        return Style.parse(definition)
    except StyleSyntaxError:
        logger.warning("invalid style for %r: %r; using default", name, definition)
        return Style.parse(DEFAULT_COLORS[name])


def build_theme(colors: Mapping[str, str]) -> Theme:
    return Theme(**{name: _parse(name, colors) for name in DEFAULT_COLORS})
