"""Remote serving entry point using textual-serve.

Each connected client gets its own `termpress` process, so sessions share
nothing but the read-only content store on disk.
"""

from __future__ import annotations

import logging
import shlex
import sys

from textual_serve.server import Server

import termpress.io.logging_setup
import termpress.settings
from termpress.settings import RuntimeConfig

logger = logging.getLogger(__name__)


def session_command(config: RuntimeConfig) -> str:
    """Command line that starts one browsing session with this config."""
    args = [
        sys.executable,
        "-m",
        "termpress.cli",
        "--store",
        config.store_root,
        "--site-name",
        config.site_name,
        "--code-theme",
        config.code_theme,
    ]
    if not config.high_performance:
        args.append("--no-high-performance")
    if not config.dark:
        args.append("--light")
    return shlex.join(args)


def run_server(config: RuntimeConfig) -> None:
    server = Server(
        command=session_command(config),
        host=config.host,
        port=config.port,
        title=config.site_name,
    )
    logger.info("server started host=%s port=%s store=%s", config.host, config.port, config.store_root)
    print(f"🌐 {config.site_name} serving on http://{config.host}:{config.port}")
    # Blocks until interrupted; the server winds down its sessions on exit.
    server.serve()
    logger.info("server stopped")


def main():
    """Launch the server with settings from file and environment only."""
    termpress.io.logging_setup.configure(role="serve")
    run_server(termpress.settings.resolve_config())


if __name__ == "__main__":
    main()
