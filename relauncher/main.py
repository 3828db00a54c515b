"""Relauncher - replace a running executable with a fresh instance.

Finds the configured executable in the process table, force-kills it
without waiting for it to exit, and starts a new detached instance.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from relauncher.config import get_config, load_config
from relauncher.exceptions import ConfigError
from relauncher.platform.factory import create_process_controller
from relauncher.replacer import ProcessReplacer, RunReport
from relauncher.utils.logging import get_logger, setup_logging
from relauncher.utils.terminal_ui import TerminalUI

log = get_logger("main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Kill a running executable and launch a new instance of it"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a config.yaml (default: the bundled relauncher/config.yaml)",
    )
    parser.add_argument(
        "--target",
        default=None,
        help="Executable name to replace, overrides target.name",
    )
    parser.add_argument(
        "--launch-path",
        default=None,
        help="Path to start after the kill, overrides target.launch_path",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file instead of stderr",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def replace_target(
    replacer: ProcessReplacer,
    ui: TerminalUI,
    target: str,
    launch_path: str | None = None,
) -> RunReport:
    """Run one replacement and print its outcome."""
    report = replacer.run(target, launch_path)
    ui.print_report(report)
    return report


def main(argv: list[str] | None = None) -> None:
    """Entry point for the relauncher."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else get_config()
    except (ConfigError, FileNotFoundError) as e:
        setup_logging()
        log.error("Failed to load configuration: %s", e)
        raise SystemExit(1) from e

    log_cfg = config["logging"]
    setup_logging(
        level=logging.DEBUG if args.verbose else log_cfg["level"],
        log_file=args.log_file or log_cfg.get("file"),
    )

    target = args.target or config["target"]["name"]
    launch_path = args.launch_path or config["target"].get("launch_path")

    replacer = ProcessReplacer(create_process_controller())
    replace_target(replacer, TerminalUI(), target, launch_path)


if __name__ == "__main__":
    main()
