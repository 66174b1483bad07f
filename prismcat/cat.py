"""
Input plumbing: open each named input (or stdin for "-"), decode it, and feed
its characters through the colorizer. Inputs are drained one after another.
"""
import io
import logging
import sys
from typing import Iterator, TextIO

from .render import Colorizer

logger = logging.getLogger(__name__)

STDIN_NAME = "-"
DEFAULT_CHUNK_SIZE = 8192


class InputError(Exception):
    """An input could not be opened or read. Fatal for the whole run."""
    def __init__(self, message: str, name: str, cause: BaseException | None = None):
        super().__init__(message)
        self.name = name
        self.cause = cause


def _reason(e: BaseException) -> str:
    if isinstance(e, OSError) and e.strerror:
        return e.strerror
    return str(e)


def open_input(name: str, encoding: str, stdin: TextIO | None = None) -> TextIO:
    """Open one input as text. newline="" keeps line endings byte-for-byte."""
    if name == STDIN_NAME:
        source = stdin if stdin is not None else sys.stdin
        buffer = getattr(source, "buffer", None)
        if buffer is None:
            # Already-decoded text stream (tests, embedding)
            return source
        return io.TextIOWrapper(buffer, encoding=encoding, newline="")
    try:
        return open(name, encoding=encoding, newline="")
    except OSError as e:
        raise InputError(f'Cannot open input file "{name}": {_reason(e)}', name, e) from e


def _close_input(name: str, f: TextIO, stdin: TextIO | None) -> None:
    if name != STDIN_NAME:
        f.close()
    elif isinstance(f, io.TextIOWrapper) and f is not (stdin or sys.stdin):
        # Leave the process's stdin open for a later "-"
        f.detach()


def iter_chars(f: TextIO, name: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """Yield decoded characters; read and decode failures become InputError."""
    while True:
        try:
            chunk = f.read(chunk_size)
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f'Error reading input file "{name}": {_reason(e)}', name, e) from e
        if not chunk:
            return
        yield from chunk


def concatenate(
    names: list[str],
    out: TextIO,
    colorizer: Colorizer | None = None,
    *,
    encoding: str = "utf-8",
    stdin: TextIO | None = None,
) -> None:
    """
    Copy every input to out in order, colorized when a colorizer is given.
    Each input gets fresh render state. Stops at the first failing input.
    """
    for name in names or [STDIN_NAME]:
        logger.debug("Reading %s (encoding=%s)", name, encoding)
        f = open_input(name, encoding, stdin)
        try:
            chars = iter_chars(f, name)
            chunks = colorizer.colorize(chars) if colorizer is not None else chars
            for chunk in chunks:
                out.write(chunk)
        except InputError:
            # Do not leave the terminal painted when a read fails mid-stream
            if colorizer is not None:
                out.write(colorizer.encoder.reset_escape())
                out.flush()
            raise
        finally:
            _close_input(name, f, stdin)
        out.flush()
