"""CLI entry point for termpress."""

import argparse
import logging
import sys

import termpress.io.logging_setup
import termpress.serve
import termpress.settings
from termpress.content.store import ContentStore
from termpress.tui.app import TermpressApp

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse a markdown site in the terminal")
    parser.add_argument(
        "--store",
        dest="store_root",
        type=str,
        default=None,
        help="Content store directory (default: fs). Env: TERMPRESS_STORE_ROOT",
    )
    parser.add_argument(
        "--site-name",
        type=str,
        default=None,
        help="Name shown in the header (default: termpress). Env: TERMPRESS_SITE_NAME",
    )
    parser.add_argument(
        "--code-theme",
        type=str,
        default=None,
        help="Pygments theme for code blocks (default: monokai). Env: TERMPRESS_CODE_THEME",
    )
    parser.add_argument(
        "--no-high-performance",
        dest="high_performance",
        action="store_const",
        const=False,
        default=None,
        help="Draw the document through the normal frame instead of a synced scroll area",
    )
    parser.add_argument(
        "--light",
        dest="dark",
        action="store_const",
        const=False,
        default=None,
        help="Use colors for light terminal backgrounds",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        default=False,
        help="Serve sessions to remote clients instead of running locally",
    )
    parser.add_argument("--host", type=str, default=None, help="Bind address for --serve (default: localhost)")
    parser.add_argument("--port", type=int, default=None, help="Bind port for --serve (default: 23234)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    overrides = {
        key: getattr(args, key)
        for key in ("store_root", "site_name", "code_theme", "high_performance", "dark", "host", "port")
    }

    # [LAW:single-enforcer] Runtime logger configuration is centralized in io.logging_setup.
    # The local TUI owns the terminal, so only the server logs to stderr.
    log_runtime = termpress.io.logging_setup.configure(
        role="serve" if args.serve else "session",
        stream=args.serve,
    )
    logger.info(
        "logging configured session=%s level=%s file=%s",
        log_runtime.session_id,
        log_runtime.level_name,
        log_runtime.file_path,
    )

    config = termpress.settings.resolve_config(overrides)

    if args.serve:
        termpress.serve.run_server(config)
        return 0

    app = TermpressApp(ContentStore(config.store_root), config, session_id=log_runtime.session_id)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
