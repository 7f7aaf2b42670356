"""
Command-line interface for quickadd-tmdb.

This module provides a terminal host for the capture flow: text prompts and
numbered selection menus on stdin/stdout.
"""

import sys
import json
import argparse
from typing import Any, Callable, List, Optional, Sequence

from quickadd_tmdb import __version__
from quickadd_tmdb.config import get_settings, TMDB_API_KEY_OPTION, TYPE_OPTION, LOG_LEVEL, LOG_FILE
from quickadd_tmdb.core.capture import run
from quickadd_tmdb.core.host import QuickAdd, QuickAddApi
from quickadd_tmdb.exceptions import SelectionCancelledError
from quickadd_tmdb.models.media import MediaType
from quickadd_tmdb.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


class TerminalQuickAddApi(QuickAddApi):
    """
    Prompt widgets backed by the terminal.
    """

    def input_prompt(self, message: str) -> str:
        """
        Read one line of text, trimmed of surrounding whitespace.

        Raises:
            SelectionCancelledError: On end of input
        """
        try:
            return input(f"{message}: ").strip()
        except EOFError:
            raise SelectionCancelledError(f"No answer to '{message}'") from None

    def suggester(self, display: Callable[[Any], str], items: Sequence[Any]) -> Any:
        """
        Show a numbered menu and return the chosen item.

        Entering 0 cancels. Invalid input asks again.

        Raises:
            SelectionCancelledError: On 0 or end of input
        """
        items = list(items)
        print()
        for idx, item in enumerate(items, 1):
            print(f"{idx}. {display(item)}")
        print("0. Cancel")

        while True:
            try:
                choice = input(f"\nSelect [1-{len(items)}] or 0 to cancel: ").strip()
            except EOFError:
                raise SelectionCancelledError("Selection cancelled") from None
            if choice == "0":
                raise SelectionCancelledError("Selection cancelled")
            if choice.isdigit() and 1 <= int(choice) <= len(items):
                return items[int(choice) - 1]
            print("Invalid selection. Please try again.")


class CLI:
    """
    Command-line interface for quickadd-tmdb.
    """

    def __init__(self):
        """Initialize the CLI."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create the argument parser.

        Returns:
            Configured argument parser
        """
        parser = argparse.ArgumentParser(
            description="quickadd-tmdb - Note template variables from TMDB",
            epilog="Settings default to TMDB_API_KEY and TMDB_TYPE from the environment or .env."
        )

        parser.add_argument(
            "--type", "-t",
            choices=[media_type.value for media_type in MediaType],
            help="Media type to search for"
        )

        parser.add_argument(
            "--api-key", "-k",
            help="TMDB API key"
        )

        parser.add_argument(
            "--json", "-j",
            action="store_true",
            help="Print the variables as JSON"
        )

        parser.add_argument(
            "--debug", "-d",
            action="store_true",
            help="Enable debug logging"
        )

        parser.add_argument(
            "--version", "-v",
            action="store_true",
            help="Show version information"
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """
        Parse command-line arguments.

        Args:
            args: Command-line arguments to parse (defaults to sys.argv)

        Returns:
            Parsed arguments
        """
        return self.parser.parse_args(args)

    def process_args(self, args: argparse.Namespace, quick_add_api: Optional[QuickAddApi] = None):
        """
        Process the parsed arguments.

        Args:
            args: Parsed arguments
            quick_add_api: Prompt implementation, the terminal by default

        Returns:
            The variable mapping, or None when only the version was shown
        """
        if args.version:
            self._show_version()
            return None

        settings = get_settings()
        if args.api_key:
            settings[TMDB_API_KEY_OPTION] = args.api_key
        if args.type:
            settings[TYPE_OPTION] = args.type

        quick_add = QuickAdd(quick_add_api or TerminalQuickAddApi())
        variables = run(quick_add, settings)
        self._print_variables(variables, as_json=args.json)
        return variables

    def _show_version(self):
        """Show version information."""
        print(f"quickadd-tmdb v{__version__}")

    def _print_variables(self, variables, as_json=False):
        if as_json:
            print(json.dumps(variables, indent=2, ensure_ascii=False))
            return
        print()
        for key, value in variables.items():
            print(f"{key}: {value}")


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    cli = CLI()
    args = cli.parse_args(argv)
    setup_logging('DEBUG' if args.debug else LOG_LEVEL, LOG_FILE or None)
    try:
        cli.process_args(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        logger.exception("Capture failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
