"""CLI entry point for termdash."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

import termdash
import termdash.io.logging_setup
import termdash.io.settings
from termdash.app.action import RefreshData
from termdash.app.wiring import make_runtime
from termdash.core.buffer import CellBuffer
from termdash.core.renderer import Renderer
from termdash.io.settings import Config, clamp_interval
from termdash.tui.host import TermdashApp

logger = logging.getLogger(__name__)


def parse_size(raw: str) -> tuple[int, int]:
    """Parse "WIDTHxHEIGHT" (e.g. 100x30)."""
    try:
        width, height = (int(part) for part in raw.lower().split("x", 1))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {raw!r}") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {raw!r}")
    return width, height


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termdash", description="Terminal dashboard for an entry feed")
    parser.add_argument("--version", action="version", version=f"%(prog)s {termdash.__version__}")
    parser.add_argument("--base-url", type=str, default=None, help="Feed API base URL (switches off demo data)")
    parser.add_argument("--demo", action="store_true", help="Use built-in demo data even if a base URL is set")
    parser.add_argument(
        "--refresh-interval",
        type=int,
        default=None,
        help="Seconds between automatic refreshes (5-3600, default: from settings)",
    )
    parser.add_argument("--debug", action="store_true", help="Treat runtime invariant violations as fatal")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: TERMDASH_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--snapshot",
        type=parse_size,
        default=None,
        metavar="WIDTHxHEIGHT",
        help="Render one frame after the first load as plain text and exit",
    )
    return parser


def resolve_config(args: argparse.Namespace, config: Config) -> Config:
    """Apply command-line overrides on top of the saved settings."""
    if args.base_url is not None:
        config = replace(config, base_url=args.base_url, demo=False)
    if args.demo:
        config = replace(config, demo=True)
    if args.refresh_interval is not None:
        config = replace(config, refresh_interval=clamp_interval(args.refresh_interval))
    if args.debug:
        config = replace(config, debug=True)
    return config


def render_snapshot(config: Config, width: int, height: int, provider=None, timeout: float = 10.0) -> str:
    with make_runtime(config, provider, save_config=lambda c: None, width=width, height=height) as runtime:
        runtime.dispatch(RefreshData())
        runtime.settle(timeout)
        buffer = CellBuffer(width, height)
        Renderer().render(runtime.build(), buffer.region, buffer)
        return buffer.to_text()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    snapshot = args.snapshot is not None
    log = termdash.io.logging_setup.configure(args.log_level, stderr=snapshot)
    config = resolve_config(args, termdash.io.settings.load_config())
    logger.info("termdash %s starting; log file %s", termdash.__version__, log.file_path)

    if snapshot:
        width, height = args.snapshot
        print(render_snapshot(config, width, height))
        return 0

    runtime = make_runtime(config)
    app = TermdashApp(runtime, tick_interval=1.0)
    try:
        app.run()
    finally:
        runtime.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
