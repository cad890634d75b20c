import argparse
import sys
from typing import List, Optional

from loguru import logger

import config
from core.logging_config import configure_logging
from services.file_manager import ensure_folder, resolve_data_folder
from services.member_service import MemberRegistry

"""
Entry point for the Member Management System.
Run this file and pick the console or the desktop interface.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=config.APP_NAME)
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--console", action="store_true", help="Start the text-based interface")
    mode.add_argument("--gui", action="store_true", help="Start the desktop interface")
    parser.add_argument("--data-dir", help="Folder holding gym_records.csv and logs")
    parser.add_argument("--log-level", default="WARNING", help="Log level shown on stderr")
    return parser


def choose_mode() -> str:
    """Asks which interface to open. Bad or missing input falls back to the console."""
    print(f"Welcome to the {config.APP_NAME}")
    print("=======================================")
    print("Please choose your interface mode:")
    print("1. Text-Based Interface (Console)")
    print("2. Graphical User Interface (GUI)")
    try:
        choice = input("Enter your choice (1 or 2): ").strip()
    except EOFError:
        choice = "1"
    return "gui" if choice == "2" else "console"


def run_console(registry: MemberRegistry) -> int:
    from ui.console_app import ConsoleApp

    ConsoleApp(registry).run()
    return 0


def run_gui(registry: MemberRegistry, data_dir: Optional[str]) -> int:
    try:
        from ui.main_window import MemberApp
        app = MemberApp(sys.argv, registry=registry, data_dir=data_dir)
    except Exception as e:
        # Not being able to open the chosen UI is the only fatal error
        logger.critical(f"Could not start the desktop interface: {e}")
        return 1

    app.start()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # The GUI asks for a folder on first run; the console falls back to the working directory
    mode = "gui" if args.gui else "console" if args.console else choose_mode()
    if mode == "console" or args.data_dir:
        resolve_data_folder(args.data_dir)

    ensure_folder(config.LOG_FOLDER)
    configure_logging(args.log_level, config.LOG_FOLDER)
    logger.info(f"Starting in {mode} mode, data folder {config.DATA_FOLDER}")

    # One registry shared by whichever interface runs
    registry = MemberRegistry()
    if mode == "gui":
        return run_gui(registry, args.data_dir)
    return run_console(registry)


if __name__ == "__main__":
    sys.exit(main())
