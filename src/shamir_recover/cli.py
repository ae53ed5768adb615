"""Command line interface for recovering secrets from share documents."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from . import config
from .document import DocumentError, recover_from_file
from .errors import ReconstructionError

DEFAULT_FILES = ("testcase1.json", "testcase2.json")
_SMALL = 10**512

USAGE = """Usage:
1. Create JSON files named 'testcase1.json' and 'testcase2.json' in the current directory
2. Or run: shamir-recover <file1.json> <file2.json> ..."""


def _decimal(value: int) -> str:
    # str() refuses ints past sys.get_int_max_str_digits(), whose floor is 640.
    if value < 0:
        return "-" + _decimal(-value)
    if value < _SMALL:
        return str(value)
    half = value.bit_length() * 30103 // 200000
    high, low = divmod(value, 10**half)
    return _decimal(high) + _decimal(low).zfill(half)


def _format_secret(secret: int, as_hex: bool) -> str:
    return hex(secret) if as_hex else _decimal(secret)


def _configure_logging(verbose: bool) -> None:
    level = logging.getLevelName(config.policy.log_level)
    if verbose:
        level = logging.DEBUG
    elif not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _default_files() -> list[tuple[int, str]]:
    found: list[tuple[int, str]] = []
    for number, name in enumerate(DEFAULT_FILES, start=1):
        if Path(name).exists():
            found.append((number, name))
        else:
            click.echo(f"File {name} not found, skipping...")
    return found


@click.command()
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False))
@click.option("--hex", "as_hex", is_flag=True, help="Print the secret in hexadecimal")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(files: tuple[str, ...], as_hex: bool, verbose: bool) -> None:
    """Recover the secret (the polynomial's constant term) from each share document FILE."""

    _configure_logging(verbose)
    if files:
        jobs = list(enumerate(files, start=1))
    else:
        jobs = _default_files()
        if not jobs:
            click.echo(USAGE)
            return

    failed = False
    for number, name in jobs:
        try:
            secret = recover_from_file(name)
        except (OSError, DocumentError, ReconstructionError) as exc:
            click.echo(f"Error ({name}): {exc}", err=True)
            failed = True
            continue
        click.echo(f"=== Test Case {number} (from {name}) ===")
        click.echo(f"Secret (c): {_format_secret(secret, as_hex)}")
        click.echo()

    if failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
