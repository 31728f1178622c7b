#!/usr/bin/env python3
"""
MeTube Upload Client - Main Entry Point

Uploads a video file to a MeTube server and shows upload progress.

Usage:
    python main_client.py [--gui | --cli FILE] [--url PAGE_URL] [--serve-path PATH]
                          [--config FILE] [--timeout MS] [--verbose]

Modes:
    --gui        Launch with PyQt6 GUI (default)
    --cli FILE   Upload FILE from the command line
"""

import sys
import os
import argparse
import logging

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from client.utils.config import ClientConfig, ConfigError
from client.utils.logger import logger
from common.constants import DEFAULT_CONFIG_PATH


def run_gui_client(config: ClientConfig):
    """Run the GUI client."""
    try:
        from client.ui.upload_gui import main as gui_main
    except ImportError:
        logger.error("[ERROR] PyQt6 not installed. Install with: pip install PyQt6")
        sys.exit(1)

    gui_main(config)


def run_cli_client(config: ClientConfig, file_path: str) -> int:
    """Run the CLI client."""
    from client.main_client import UploadCli

    try:
        return UploadCli(config).run(file_path)
    except KeyboardInterrupt:
        logger.info("[INFO] Interrupted by user")
        return 130


def build_config(args) -> ClientConfig:
    """Combine config file, environment and command-line options."""
    config = ClientConfig.load(args.config)
    config.update(page_url=args.url, serve_path=args.serve_path, timeout_ms=args.timeout)
    return config


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(description='MeTube Upload Client')
    parser.add_argument('--url', type=str, default=None,
                        help='URL of the upload page; the mount path is detected from it')
    parser.add_argument('--serve-path', type=str, default=None,
                        help='Path the server is mounted under (overrides detection)')
    parser.add_argument('--config', '-c', type=str, default=DEFAULT_CONFIG_PATH,
                        help=f'Path of config file (default: {DEFAULT_CONFIG_PATH})')
    parser.add_argument('--timeout', type=int, default=None,
                        help='Upload timeout in milliseconds')
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--gui', action='store_true',
                      help='Run with the PyQt6 GUI (default)')
    mode.add_argument('--cli', type=str, default=None, metavar='FILE',
                      help='Upload FILE in command-line mode')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logger.set_level(logging.DEBUG)

    try:
        config = build_config(args)
    except ConfigError as e:
        logger.log_error("configuration", e)
        sys.exit(2)

    logger.debug(f"[CONFIG] {config.get_connection_info()}")

    # Always use GUI unless --cli is specified
    if args.cli is None:
        run_gui_client(config)
    else:
        sys.exit(run_cli_client(config, args.cli))


if __name__ == "__main__":
    main()
