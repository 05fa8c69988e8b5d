# ==============================================
# Input sources
# ==============================================
#
# PURPOSE:
#   Fetch the raw bytes to analyze from wherever the user points:
#
#   - an http(s):// URL  → fetched with requests
#   - a file path        → read from disk
#   - "-" or nothing     → standard input, but only when something is
#                          piped in; an interactive terminal means the
#                          user forgot to give an input
#
# FUNCTIONS:
# ----------
# - read_source(source, stdin, http_timeout) -> bytes
#     Raises SourceUnavailable when nothing can be read.
#
# ==============================================

import logging
from pathlib import Path
from typing import BinaryIO, Optional

import requests

from settings_guessr.errors import SourceUnavailable

logger = logging.getLogger(__name__)

USAGE = "Usage: pipe your documents in the command or give the path to a file as argument."

URL_SCHEMES = ("http://", "https://")


def is_url(source: str) -> bool:
    return source.lower().startswith(URL_SCHEMES)


def stdin_is_interactive(stream: BinaryIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def read_source(
    source: Optional[str],
    stdin: Optional[BinaryIO] = None,
    http_timeout: float = 10.0
) -> bytes:
    """
    Read the whole input.

    Args:
        source: URL, file path, "-" for stdin, or None
        stdin: Binary stream used when reading standard input
        http_timeout: Seconds to wait for a URL to answer

    Returns:
        The raw input bytes

    Raises:
        SourceUnavailable: no usable input
    """
    if source and source != "-":
        if is_url(source):
            return fetch_url(source, timeout=http_timeout)
        return read_file(source)

    if stdin is None:
        raise SourceUnavailable(USAGE)

    # An explicit "-" reads stdin even from a terminal
    if source is None and stdin_is_interactive(stdin):
        raise SourceUnavailable(USAGE)

    logger.debug("reading documents from standard input")
    return stdin.read()


def read_file(path: str) -> bytes:
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise SourceUnavailable(f"cannot read {path}: {e.strerror or e}") from e
    logger.debug("read %d bytes from %s", len(data), path)
    return data


def fetch_url(url: str, timeout: float = 10.0) -> bytes:
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise SourceUnavailable(f"cannot fetch {url}: {e}") from e
    logger.debug("fetched %d bytes from %s", len(response.content), url)
    return response.content
