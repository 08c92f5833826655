"""Command line tool printing secure random values."""

import argparse
import logging
from typing import Callable, List, Optional

import secrand
from .errors import SecRandError
from .random_source import get_provider
from .utils import EnvironmentManager, EnvironmentVariables

BYTE_KINDS = ("bytes", "hex", "base64")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="secrand", description="Print cryptographically secure random values."
    )
    parser.add_argument(
        "kind",
        choices=[*BYTE_KINDS, "int", "float"],
        help="What to generate: raw bytes (shown as a Python literal), hex, base64, int below N, or float in [0, 1)",
    )
    parser.add_argument(
        "n",
        type=int,
        nargs="?",
        default=None,
        help="Byte count for bytes/hex/base64 (default 16), or exclusive bound for int",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="Number of values to print, one per line",
    )
    args = parser.parse_args(argv)
    if args.kind == "int" and (args.n is None or args.n <= 0):
        parser.error("int requires a positive bound N")
    if args.kind in BYTE_KINDS and args.n is not None and args.n < 0:
        parser.error(f"{args.kind} requires a non-negative byte count N")
    if args.count < 1:
        parser.error("--count must be at least 1")
    return args


def build_generator(kind: str, n: Optional[int]) -> Callable[[], object]:
    """Map a command line kind onto a secrand call."""
    if kind == "bytes":
        return lambda: secrand.random_bytes(n)
    if kind == "hex":
        return lambda: secrand.hex(n)
    if kind == "base64":
        return lambda: secrand.base64(n)
    if kind == "int":
        return lambda: secrand.secure_random(n)
    return secrand.uniform_float


def configure_logging() -> None:
    """Set up root logging from SECRAND_LOG_LEVEL.

    Raises:
        ValueError: If SECRAND_LOG_LEVEL is not a logging level name.
    """
    level = EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown SECRAND_LOG_LEVEL {level!r}")
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    """Print the requested random values and return the exit status."""
    args = parse_args(argv)
    logger = logging.getLogger("secrand")

    try:
        configure_logging()
        get_provider()
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    generate = build_generator(args.kind, args.n)
    try:
        for _ in range(args.count):
            print(generate())
    except SecRandError as e:
        logger.error("%s", e)
        return 1
    return 0
