"""
CLI interface for passgen.
"""

import logging
import sys
import threading
import time
from typing import List, Optional

import click

from .exceptions import PassgenException
from .generator import DEFAULT_COUNT, DEFAULT_LENGTH, PasswordGenerator, builder


CLIPBOARD_CLEAR_SECONDS = 60


def build_generator(no_upper: bool = False, no_lower: bool = False,
                    no_digits: bool = False, no_punctuation: bool = False,
                    allow_ambiguous: bool = False, require_upper: int = 0,
                    require_lower: int = 0, require_digit: int = 0,
                    require_punctuation: int = 0,
                    forbid: Optional[str] = None) -> PasswordGenerator:
    """Map command-line options onto builder calls."""
    generator_builder = (
        builder()
        .include_upper(not no_upper)
        .include_lower(not no_lower)
        .include_digit(not no_digits)
        .include_punctuation(not no_punctuation)
        .exclude_ambiguous(not allow_ambiguous)
        .require_upper(require_upper)
        .require_lower(require_lower)
        .require_digit(require_digit)
        .require_punctuation(require_punctuation)
    )
    if forbid:
        generator_builder.forbid(forbid)
    return generator_builder.build()


def copy_to_clipboard(passwords: List[str]) -> None:
    """Copy passwords to the clipboard and clear it again after a delay."""
    value = "\n".join(passwords)
    try:
        import pyperclip
        pyperclip.copy(value)
        click.echo("🔐 Generated password copied to clipboard.", err=True)

        # Auto-clear clipboard after CLIPBOARD_CLEAR_SECONDS
        def clear_clipboard() -> None:
            time.sleep(CLIPBOARD_CLEAR_SECONDS)
            try:
                pyperclip.copy("")
            except pyperclip.PyperclipException:
                pass

        clear_thread = threading.Thread(target=clear_clipboard, daemon=True)
        clear_thread.start()

    except ImportError:
        click.echo("pyperclip not installed. Install with: pip install pyperclip", err=True)
    except pyperclip.PyperclipException as e:
        click.echo(f"Could not copy to clipboard: {e}", err=True)


@click.command()
@click.option("--length", "-l", default=DEFAULT_LENGTH, type=click.IntRange(min=0),
              help=f"Password length (default: {DEFAULT_LENGTH})")
@click.option("--count", "-n", default=DEFAULT_COUNT, type=click.IntRange(min=1),
              help=f"Number of passwords (default: {DEFAULT_COUNT})")
@click.option("--no-upper", is_flag=True, help="Exclude upper-case letters")
@click.option("--no-lower", is_flag=True, help="Exclude lower-case letters")
@click.option("--no-digits", is_flag=True, help="Exclude digits")
@click.option("--no-punctuation", is_flag=True, help="Exclude punctuation characters")
@click.option("--allow-ambiguous", is_flag=True, help="Allow ambiguous characters (0, O, 1, l)")
@click.option("--require-upper", default=0, type=click.IntRange(min=0),
              help="Minimum upper-case letters per password")
@click.option("--require-lower", default=0, type=click.IntRange(min=0),
              help="Minimum lower-case letters per password")
@click.option("--require-digit", default=0, type=click.IntRange(min=0),
              help="Minimum digits per password")
@click.option("--require-punctuation", default=0, type=click.IntRange(min=0),
              help="Minimum punctuation characters per password")
@click.option("--forbid", "-x", default=None, help="Characters to remove from the pool")
@click.option("--copy", "-c", is_flag=True, help="Copy to clipboard (cleared after 60 seconds)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(length: int, count: int, no_upper: bool, no_lower: bool, no_digits: bool,
        no_punctuation: bool, allow_ambiguous: bool, require_upper: int,
        require_lower: int, require_digit: int, require_punctuation: int,
        forbid: Optional[str], copy: bool, verbose: bool) -> None:
    """passgen - Generate random passwords that satisfy a character policy."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        generator = build_generator(
            no_upper=no_upper,
            no_lower=no_lower,
            no_digits=no_digits,
            no_punctuation=no_punctuation,
            allow_ambiguous=allow_ambiguous,
            require_upper=require_upper,
            require_lower=require_lower,
            require_digit=require_digit,
            require_punctuation=require_punctuation,
            forbid=forbid,
        )
        passwords = generator.generate(length, count)
    except PassgenException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Using: {generator.describe()}", err=True)

    for password in passwords:
        click.echo(password)

    if copy:
        copy_to_clipboard(passwords)


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
