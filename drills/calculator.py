"""Interactive calculator reading ``<operand1> <operand2> <operator>`` lines."""

from __future__ import annotations

import enum
import logging
import math
import os
import re
import sys
import tomllib
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import TextIO

SETTINGS_FILE = "settings.toml"
LOG_LEVEL_ENV = "DRILLS_LOG"

_NUMBER = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)

_LOG_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
    "off": logging.CRITICAL + 10,
}


@dataclass(frozen=True)
class Config:
    """Calculator settings."""

    show_datetime: bool = False


class CalculationError(ValueError):
    """A line that could not be evaluated."""

    def __init__(self, message: str, log_message: str, level: int = logging.ERROR):
        super().__init__(message)
        self.message = message
        self.log_message = log_message
        self.level = level


class _ConfigProblem(enum.Enum):
    MISSING = enum.auto()
    UNPARSED = enum.auto()


def _read_config(file_path: str | os.PathLike[str]) -> tuple[Config, _ConfigProblem | None]:
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return Config(), _ConfigProblem.MISSING
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError:
        document = {}
    value = document.get("show_datetime")
    if isinstance(value, bool):
        return Config(show_datetime=value), None
    return Config(), _ConfigProblem.UNPARSED


def load_config(file_path: str | os.PathLike[str]) -> Config:
    """Load settings from a TOML file, warning on stderr and using defaults on failure."""
    config, problem = _read_config(file_path)
    if problem is _ConfigProblem.MISSING:
        print("Warning: Config file not found. Default used.", file=sys.stderr)
    elif problem is _ConfigProblem.UNPARSED:
        print("Warning: Failed to parse config file.", file=sys.stderr)
    return config


def _parse_operand(text: str) -> float:
    if not _NUMBER.fullmatch(text):
        raise CalculationError(f"Invalid number {text}", f"Invalid number input, {text}")
    return float(text)


def evaluate(line: str) -> float:
    """Evaluate one ``<operand1> <operand2> <operator>`` line."""
    parts = line.split()
    if len(parts) != 3:
        raise CalculationError(
            "Invalid input format.", f"Invalid input format: {line}", logging.WARNING
        )
    left = _parse_operand(parts[0])
    right = _parse_operand(parts[1])
    operator = parts[2]
    match operator:
        case "+":
            return left + right
        case "-":
            return left - right
        case "*":
            return left * right
        case "/":
            if right == 0.0:
                raise CalculationError(
                    "Division by zero", f"Division by zero attempted with input {line}"
                )
            return left / right
        case _:
            raise CalculationError(
                f"Unsupported operator {operator}", f"Unsupported operator {operator}"
            )


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def run(
    config: Config,
    stdin: TextIO,
    stdout: TextIO,
    logger: logging.Logger | None = None,
) -> None:
    """Run the prompt loop until ``exit`` or end of input."""

    def say(text: str = "") -> None:
        print(text, file=stdout)

    say("Welcome to the Calculator")
    say("Enter calculations in this format: <operand1> <operand2> <operator>")
    say("Supported operators: + - * /")
    say("Type 'exit' to exit the program anytime\n")

    while True:
        stdout.write("> ")
        stdout.flush()
        raw = stdin.readline()
        if not raw:
            break
        line = raw.strip()

        if line.isascii() and line.lower() == "exit":
            say("Goodbye!")
            if logger:
                logger.info("User exited the program")
            break

        if config.show_datetime:
            say(f"Current date and time: {datetime.now():%Y-%m-%d %H:%M}")

        try:
            value = evaluate(line)
        except CalculationError as err:
            say(f"Error: {err.message}")
            if logger:
                logger.log(err.level, err.log_message)
            continue

        result = _format_number(value)
        say(f"Result: {result}")
        if logger:
            logger.info("Calculation '%s',  Result '%s'", line, result)


def _configure_logger() -> logging.Logger:
    logger = logging.getLogger(__name__)
    level_name = os.environ.get(LOG_LEVEL_ENV, "error").strip().lower()
    logger.setLevel(_LOG_LEVELS.get(level_name, logging.ERROR))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("[%(asctime)s %(levelname)s %(name)s] %(message)s")
        )
        logger.addHandler(handler)
    return logger


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator with settings from ``settings.toml``."""
    config = load_config(SETTINGS_FILE)
    run(config, sys.stdin, sys.stdout)
    return 0


def log_main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator, logging events at the level named by ``DRILLS_LOG``."""
    logger = _configure_logger()
    config, problem = _read_config(SETTINGS_FILE)
    if problem is _ConfigProblem.MISSING:
        print("Warning: Config file not found. Default used.", file=sys.stderr)
    elif problem is _ConfigProblem.UNPARSED:
        logger.warning("Failed to parse config file")
    run(config, sys.stdin, sys.stdout, logger)
    return 0


if __name__ == "__main__":
    sys.exit(main())