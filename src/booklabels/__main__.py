"""
Main entry point for booklabels.
Usage: python -m booklabels --settings settings.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .game_data import LoadOrderService, PatchPlugin, PluginLoadError
from .labeling import BookPatcher
from .settings import ConfigError, PatcherSettings
from .utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="booklabels",
        description="Add skill, map marker and quest labels to book names.",
    )
    parser.add_argument(
        "--settings", type=Path, help="JSON settings file (defaults are used if omitted)"
    )
    parser.add_argument("--data-folder", type=Path, help="Folder holding the plugin files")
    parser.add_argument(
        "--load-order",
        nargs="+",
        metavar="PLUGIN",
        help="Enabled plugins, lowest priority first",
    )
    parser.add_argument("--output", help="File name of the patch plugin to write")
    parser.add_argument(
        "--dry-run", action="store_true", help="Report changes without writing the patch"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Console logging level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_settings(args: argparse.Namespace) -> PatcherSettings:
    """Load settings and apply command line overrides."""
    settings = PatcherSettings.from_file(args.settings) if args.settings else PatcherSettings()
    if args.data_folder:
        settings.data_folder = args.data_folder
    if args.load_order:
        settings.load_order = args.load_order
    if args.output:
        settings.patch_name = args.output
    if args.log_level:
        settings.logging.console_log_level = args.log_level
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")

    try:
        settings = load_settings(args)
        setup_logging(settings)
        logger.info(f"Starting booklabels {__version__}")
        if settings.get_settings_file_path():
            logger.info(f"Configuration loaded from {settings.get_settings_file_path()}")

        validation = settings.validate()
        for warning in validation.warnings:
            logger.warning(warning)
        if not validation.is_valid:
            logger.error("Configuration validation failed:")
            for error in validation.errors:
                logger.error(f"  {error}")
            return 1

        # Parsed before any data is read, so a bad option never leaves a half-written patch
        label_settings = settings.labels()

        service = LoadOrderService.from_settings(settings)
        patch = PatchPlugin(settings.patch_name)
        changes = BookPatcher(service, label_settings, patch).run()

        patch_path = settings.patch_path
        if args.dry_run:
            logger.info(f"Dry run: {len(changes)} books would be renamed")
        elif patch_path is not None:
            patch.save(patch_path)
        return 0

    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except PluginLoadError as e:
        logger.error(f"Could not load plugins: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
