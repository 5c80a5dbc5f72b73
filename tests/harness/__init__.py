"""Test harness for termdash.

Re-exports the public helpers:
    from tests.harness import run_app, settle, make_state, make_entries, ...
"""

from tests.harness.app_runner import run_app, settle
from tests.harness.builders import make_detail, make_entries, make_state, with_panel

__all__ = [
    "run_app",
    "settle",
    "make_detail",
    "make_entries",
    "make_state",
    "with_panel",
]
