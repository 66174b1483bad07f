"""
CLI: concatenate FILE(s), or standard input, to standard output in flag colors.
Usage:
  prismcat notes.txt
  fortune | prismcat -f trans
  prismcat -b -h 0.5 -v 0.2 f - g      # f, then stdin, then g, in 24-bit color
"""
import argparse
import locale
import logging
import math
import os
import sys
from pathlib import Path
from typing import TextIO

from . import __version__
from .cat import STDIN_NAME, InputError, concatenate
from .config import build_encoder, load_config, resolve_settings
from .patterns import UnknownPatternError, list_patterns
from .render import Colorizer

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INPUT = 2


def _flag_help() -> str:
    names = ", ".join(f"{name}: {i}" for i, name in list_patterns())
    return f"Flag to paint with, by name or number [{names}] (default: rainbow)."


class _Parser(argparse.ArgumentParser):
    """Usage errors exit 1, keeping 2 for input failures."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def _frequency(value: str) -> float:
    try:
        freq = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid frequency: {value!r}") from None
    if not math.isfinite(freq):
        raise argparse.ArgumentTypeError(f"frequency must be finite: {value!r}")
    return freq


def build_parser() -> argparse.ArgumentParser:
    # -h is the horizontal frequency, so help is --help only
    parser = _Parser(
        prog="prismcat",
        description="Concatenate FILE(s), or standard input, to standard output, in flag colors. "
        "With no FILE, or when FILE is -, read standard input.",
        add_help=False,
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Inputs to concatenate (default: -).")
    parser.add_argument("--flag", "-f", default=None, help=_flag_help())
    parser.add_argument(
        "--horizontal-frequency",
        "-h",
        type=_frequency,
        default=None,
        help="Horizontal color frequency (default: 0.23).",
    )
    parser.add_argument(
        "--vertical-frequency",
        "-v",
        type=_frequency,
        default=None,
        help="Vertical color frequency (default: 0.1).",
    )
    parser.add_argument(
        "--force-color",
        "-F",
        action="store_true",
        default=None,
        help="Force color even when stdout is not a tty.",
    )
    parser.add_argument(
        "--no-force-locale",
        "-l",
        action="store_true",
        help="Use the encoding from the system locale instead of assuming UTF-8.",
    )
    parser.add_argument("--random", "-r", action="store_true", default=None, help="Random colors.")
    parser.add_argument(
        "--24bit",
        "-b",
        dest="true_color",
        action="store_true",
        default=None,
        help='Output in 24-bit "true" RGB mode (not supported by all terminals).',
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random (default: current time).")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument("--list-flags", action="store_true", help="List available flags and exit.")
    parser.add_argument("--debug", action="store_true", help="Log debug messages to stderr.")
    parser.add_argument("--version", action="version", version=f"prismcat version {__version__}")
    parser.add_argument("--help", action="store_true", help="Show this message and exit.")
    return parser


def main(argv: list[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.list_flags:
        out = stdout or sys.stdout
        for i, name in list_patterns():
            out.write(f"{i}: {name}\n")
        return EXIT_OK

    config = load_config(args.config)
    try:
        settings = resolve_settings(
            config,
            flag=args.flag,
            horizontal_frequency=args.horizontal_frequency,
            vertical_frequency=args.vertical_frequency,
            true_color=args.true_color,
            random=args.random,
            seed=args.seed,
            force_color=args.force_color,
            force_utf8=False if args.no_force_locale else None,
        )
        encoder = build_encoder(settings)
    except (UnknownPatternError, ValueError) as e:
        print(e, file=sys.stderr)
        return EXIT_USAGE

    encoding = "utf-8" if settings.force_utf8 else locale.getpreferredencoding(False)
    if stdout is None:
        stdout = sys.stdout
        if hasattr(stdout, "reconfigure"):
            stdout.reconfigure(encoding=encoding, newline="")

    print_colors = settings.force_color or stdout.isatty()
    colorizer = Colorizer(encoder) if print_colors else None
    logger.debug("Coloring %s, encoding %s", "on" if print_colors else "off", encoding)

    try:
        if args.help:
            # Help text is painted like any other input
            text = build_parser().format_help()
            stdout.write(colorizer.render(text) if colorizer is not None else text)
            stdout.flush()
        else:
            concatenate(args.files or [STDIN_NAME], stdout, colorizer, encoding=encoding, stdin=stdin)
    except InputError as e:
        print(e, file=sys.stderr)
        return EXIT_INPUT
    except BrokenPipeError:
        logger.debug("Output closed early")
        _silence_stdout(stdout)
    return EXIT_OK


def _silence_stdout(stdout: TextIO) -> None:
    """Point the closed stdout at devnull so the exit-time flush does not fail again."""
    if stdout is not sys.stdout:
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)


if __name__ == "__main__":
    raise SystemExit(main())
