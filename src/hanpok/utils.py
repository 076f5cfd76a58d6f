# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Utility functions for hanpok."""

import logging
import sys

from .exceptions import InvalidTextError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configures logging for hanpok.

    Args:
        verbose: If True, DEBUG level is used.
        quiet: If True, only ERROR and higher are output.
            Takes precedence over verbose.

    Returns:
        Configured logger for hanpok.
    """
    # Determine log level (quiet takes precedence)
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    hanpok_logger = logging.getLogger("hanpok")
    hanpok_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    hanpok_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    hanpok_logger.addHandler(handler)

    logger.debug("Logging configured with level: %s", logging.getLevelName(level))
    return hanpok_logger


def ensure_text(text: str | bytes) -> str:
    """Returns text as str, decoding bytes as strict UTF-8.

    Args:
        text: A str, or UTF-8 encoded bytes.

    Returns:
        The decoded string.

    Raises:
        InvalidTextError: If bytes are not valid UTF-8.
        TypeError: If text is neither str nor bytes.
    """
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        try:
            return bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidTextError(f"Text is not valid UTF-8: {e}") from e
    raise TypeError(f"Expected str or bytes, got {type(text).__name__}")
