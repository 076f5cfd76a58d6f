# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Click-based CLI for hanpok.

This module provides the command-line interface for measuring and
truncating text against the bundled font profiles.
"""

# Standard Library
import json
import logging
import sys
from pathlib import Path

# Third Party
import click
from colorama import Fore, Style, init

# Local
from . import __version__
from .exceptions import (
    InvalidTextError,
    ProfileBuildError,
    ProfileDataError,
    UnsupportedProfileError,
)
from .measure import cut, width
from .profiles.constants import DEFAULT_END_MARKER
from .profiles.loader import profile_to_dict
from .profiles.model import FontProfile
from .profiles.store import ProfileStore, default_store
from .utils import setup_logging

EXIT_SUCCESS = 0
EXIT_GENERAL_ERROR = 1
EXIT_FILE_NOT_FOUND = 2
EXIT_UNSUPPORTED_PROFILE = 3
EXIT_INVALID_DATA = 4

logger = logging.getLogger(__name__)


def print_success(msg: str) -> None:
    """Prints a success message in green.

    Args:
        msg: The message to output.
    """
    click.echo(f"{Fore.GREEN}✓{Style.RESET_ALL} {msg}", err=True)


def print_error(msg: str) -> None:
    """Prints an error message in red.

    Args:
        msg: The error message to output.
    """
    click.echo(f"{Fore.RED}✗ Error:{Style.RESET_ALL} {msg}", err=True)


def print_warning(msg: str) -> None:
    """Prints a warning in yellow.

    Args:
        msg: The warning to output.
    """
    click.echo(f"{Fore.YELLOW}⚠{Style.RESET_ALL} {msg}", err=True)


def _load_store(profile_dirs: tuple[str, ...]) -> ProfileStore:
    if profile_dirs:
        return ProfileStore.from_directories(*profile_dirs)
    return default_store()


def _run(action) -> None:
    """Runs a command body and maps hanpok errors to exit codes."""
    try:
        action()
        exit_code = EXIT_SUCCESS
    except FileNotFoundError as e:
        print_error(str(e))
        exit_code = EXIT_FILE_NOT_FOUND
    except UnsupportedProfileError as e:
        print_error(str(e))
        exit_code = EXIT_UNSUPPORTED_PROFILE
    except (ProfileDataError, ProfileBuildError, InvalidTextError) as e:
        print_error(str(e))
        exit_code = EXIT_INVALID_DATA
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        exit_code = EXIT_GENERAL_ERROR

    sys.exit(exit_code)


def _resolve(ctx: click.Context) -> FontProfile:
    opts = ctx.obj
    store = _load_store(opts["profile_dirs"])
    profile = store.resolve(opts["font"], opts["size"], opts["bold"])
    logger.debug("Using profile %s", profile)
    return profile


@click.group()
@click.option(
    "-f",
    "--font",
    default="gulim",
    show_default=True,
    help="Font name or alias (e.g. Gulim, 굴림, Batang)",
)
@click.option(
    "-s",
    "--size",
    default="12px",
    show_default=True,
    help="Font size: 12, 12px or 9pt",
)
@click.option("--bold", is_flag=True, help="Use the bold weight")
@click.option(
    "--profile-dir",
    "profile_dirs",
    multiple=True,
    type=click.Path(file_okay=False),
    help="Extra directory with profile JSON files (repeatable)",
)
@click.option("-q", "--quiet", is_flag=True, help="Only output errors")
@click.option("--verbose", is_flag=True, help="Detailed output")
@click.version_option(version=__version__)
@click.pass_context
def main(
    ctx: click.Context,
    font: str,
    size: str,
    bold: bool,
    profile_dirs: tuple[str, ...],
    quiet: bool,
    verbose: bool,
) -> None:
    """Estimates the on-screen pixel width of text and cuts it to fit."""
    # Initialize colorama for Windows compatibility
    init()
    setup_logging(verbose=verbose, quiet=quiet)
    ctx.obj = {
        "font": font,
        "size": size,
        "bold": bold,
        "profile_dirs": profile_dirs,
        "quiet": quiet,
    }


@main.command("width")
@click.argument("text")
@click.pass_context
def width_command(ctx: click.Context, text: str) -> None:
    """Prints the width of TEXT in pixels."""

    def action() -> None:
        profile = _resolve(ctx)
        click.echo(width(profile, text))

    _run(action)


@main.command("cut")
@click.argument("text")
@click.argument("max_width", type=int)
@click.option(
    "-e",
    "--end",
    default=DEFAULT_END_MARKER,
    show_default=True,
    help="End marker appended when text is cut",
)
@click.pass_context
def cut_command(ctx: click.Context, text: str, max_width: int, end: str) -> None:
    """Cuts TEXT to at most MAX_WIDTH pixels."""

    def action() -> None:
        profile = _resolve(ctx)
        result = cut(profile, text, max_width, end)
        click.echo(result)
        if result != text and not ctx.obj["quiet"]:
            print_warning(
                f"Cut {len(text) - len(result.removesuffix(end))} character(s) "
                f"to fit {max_width}px"
            )

    _run(action)


@main.command("profiles")
@click.pass_context
def profiles_command(ctx: click.Context) -> None:
    """Lists the available font profiles."""

    def action() -> None:
        store = _load_store(ctx.obj["profile_dirs"])
        for profile in store:
            click.echo(
                f"{profile.family}\t{profile.size}px\t{profile.weight}"
                f"\t{profile.form.value}"
            )

    _run(action)


@main.command("build-profile")
@click.argument("font_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--px", "px", type=int, required=True, help="Pixel size to build")
@click.option("--family", default=None, help="Family identifier (default: from font)")
@click.option(
    "--font-number",
    type=int,
    default=0,
    show_default=True,
    help="Font index inside a .ttc collection",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the profile JSON here instead of stdout",
)
@click.pass_context
def build_profile_command(
    ctx: click.Context,
    font_file: str,
    px: int,
    family: str | None,
    font_number: int,
    output: str | None,
) -> None:
    """Builds a profile JSON document from FONT_FILE.

    The weight is taken from the global --bold flag.
    """

    def action() -> None:
        from .profiles.builder import build_profile_from_file

        profile = build_profile_from_file(
            font_file,
            px,
            family=family,
            bold=ctx.obj["bold"],
            font_number=font_number,
        )
        document = json.dumps(profile_to_dict(profile), ensure_ascii=False, indent=2)
        if output is None:
            click.echo(document)
            return
        Path(output).write_text(document + "\n", encoding="utf-8")
        if not ctx.obj["quiet"]:
            print_success(f"Wrote {profile} to {output}")

    _run(action)


if __name__ == "__main__":
    main()
