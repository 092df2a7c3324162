"""Command-line interface: argument parsing, one-shot evaluation and the REPL."""

from __future__ import annotations

import argparse
import json
import sys

from . import config
from .engine import Calculator
from .logging_config import get_logger, setup_logging
from .types import CalcResult
from .variables import VariableStore

logger = get_logger("cli")

EXIT_COMMAND = "/exit"
HELP_COMMAND = "/help"


def print_help_text() -> None:
    """Print help text for REPL commands."""
    help_text = f"""Kalkulator Bulat version {config.VERSION}

The program evaluates integer expressions with variables.
  Expressions:  2 + 3 * 4, (2 + 3) * 4, 2 ^ 10, 10 / 3
  Unary signs:  5 - - 3, 5 - - - 3, 5 + + + 3
  Variables:    a = 5, b = a, then b
Tokens are separated by spaces; parentheses may be written without them.
Division truncates toward zero.

Commands:
  /help   Show this help text
  /exit   Leave the program"""
    print(help_text)


def handle_command(command: str) -> bool:
    """Run a slash command. Returns True when the REPL should stop."""
    if command == EXIT_COMMAND:
        print("Bye!")
        return True
    if command == HELP_COMMAND:
        print_help_text()
        return False
    print("Unknown command")
    return False


def print_result(result: CalcResult, output_format: str = "human") -> None:
    """Print a result; a successful assignment prints nothing in human format."""
    if output_format == "json":
        print(json.dumps(result.to_dict()))
        return
    message = result.message
    if message is not None:
        print(message)


def repl_loop(calculator: Calculator, output_format: str = "human") -> None:
    """Read lines from stdin until /exit or end of input."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    while True:
        try:
            raw = input(config.PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print("Bye!")
            break
        if not raw:
            continue
        if raw.startswith("/"):
            if handle_command(raw):
                break
            continue
        print_result(calculator.calculate(raw), output_format=output_format)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Kalkulator Bulat CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="bulat")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one line and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.LOG_LEVEL.upper(),
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--max-exponent", type=int, help="Largest exponent accepted by ^"
    )
    parser.add_argument(
        "--max-input-length", type=int, help="Longest input line accepted"
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.max_exponent is not None and args.max_exponent >= 0:
        config.MAX_EXPONENT = int(args.max_exponent)
    if args.max_input_length and args.max_input_length > 0:
        config.MAX_INPUT_LENGTH = int(args.max_input_length)

    if args.version:
        print(config.VERSION)
        return 0

    calculator = Calculator(VariableStore())

    if args.eval_expr is not None:
        expr = args.eval_expr.strip()
        if not expr:
            print("Error: Empty input. Please enter an expression or assignment.")
            return 1
        result = calculator.calculate(expr)
        print_result(result, output_format=args.format)
        return 0 if result.ok else 1

    logger.debug("Starting REPL")
    repl_loop(calculator, output_format=args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
