"""Command-line interface for Stream Embed.

WHY: The tool is meant to sit in a shell pipeline:
``cat data.bin | stream-embed -b -n out > data.inc``. The CLI turns
flags into an operation (help, version, transcode), an output mode
(ascii, binary), and a stream name, then runs exactly one transcoder
from stdin to stdout.

HOW: Uses argparse with the built-in help disabled so ``-h`` and ``-v``
print the tool's own usage and version text. The selected transcoder
reads ``sys.stdin.buffer`` and writes through a StreamSink over
``sys.stdout.buffer``. Diagnostics and log records go to stderr.

RULES:
- No positional parameters allowed (error, exit 1)
- -h wins over -v, -v wins over transcoding
- -b selects binary mode, ascii is the default
- -n sets the stream name (default: cout, or STREAM_EMBED_NAME)
- Read/write failures print "Error: ..." to stderr and exit 1
- Ctrl-C exits 130
- stdout carries only generated code (or help/version text)
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from stream_embed.config import (
    DEFAULT_LEGACY_EOF,
    DEFAULT_LOG_LEVEL,
    DEFAULT_STREAM_NAME,
    version_text,
)
from stream_embed.core.errors import TranscodeError
from stream_embed.core.io import StreamSink
from stream_embed.transcoders import TRANSCODERS

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def _status(msg: str) -> None:
    """Print a diagnostic message to stderr.

    RULES:
    - Never written to stdout, which carries generated code
    - Always flush after writing
    """
    print(msg, file=sys.stderr, flush=True)


def help_text(prog: str) -> str:
    """Return the usage text shown by ``-h``."""
    return "\n".join([
        "",
        "... | {} [-bhnv] | ...".format(prog),
        "",
        "  -b            create output suitable for binary input files",
        "  -h            show help and exit",
        "  -n <str>      use <str> as name of the stream object (default: {})".format(
            DEFAULT_STREAM_NAME
        ),
        "  -v            show version and exit",
        "  --legacy-eof  close an unterminated last line as the original tool did",
        "  --verbose     log progress to stderr",
        "",
    ])


def log_level(verbose: bool) -> int:
    """Return the root log level: DEBUG with --verbose, else STREAM_EMBED_LOG_LEVEL."""
    if verbose:
        return logging.DEBUG
    return getattr(logging, DEFAULT_LOG_LEVEL, logging.WARNING)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=log_level(verbose),
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() lets tests inspect
    parsed arguments without touching stdin/stdout.

    RULES:
    - add_help is off; -h is an ordinary flag handled by run()
    - Positionals are collected so run() can reject them with a clear message
    """
    # prog defaults to the basename of argv[0], as shown in -h.
    parser = argparse.ArgumentParser(
        description="Convert stdin into C++ source that writes the same bytes.",
        add_help=False,
    )

    parser.add_argument(
        "-b",
        dest="output",
        action="store_const",
        const="binary",
        default="ascii",
        help="Create output suitable for binary input files.",
    )

    parser.add_argument(
        "-h",
        dest="show_help",
        action="store_true",
        help="Show help and exit.",
    )

    parser.add_argument(
        "-n",
        dest="name",
        metavar="<str>",
        default=DEFAULT_STREAM_NAME,
        help="Name of the stream object (default: %(default)s).",
    )

    parser.add_argument(
        "-v",
        dest="show_version",
        action="store_true",
        help="Show version and exit.",
    )

    parser.add_argument(
        "--legacy-eof",
        action="store_true",
        default=DEFAULT_LEGACY_EOF,
        help="Close an unterminated last line exactly as the original tool did.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress to stderr.",
    )

    parser.add_argument("params", nargs="*", help=argparse.SUPPRESS)

    return parser


def _transcode(args: argparse.Namespace) -> int:
    """Run the selected transcoder from stdin to stdout."""
    options: Dict[str, Any] = {}
    if args.output == "ascii":
        options["legacy_eof_close"] = args.legacy_eof
    transcoder = TRANSCODERS[args.output](args.name, **options)
    logger.debug("Running %s transcoder with stream name %r", transcoder.name, args.name)

    sink = StreamSink(sys.stdout.buffer)
    try:
        transcoder.transcode(sys.stdin.buffer, sink)
        sink.flush()
    except TranscodeError as e:
        _status("Error: {}".format(e))
        return EXIT_FAILURE
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        return EXIT_INTERRUPTED
    return EXIT_OK


def run(args: argparse.Namespace, prog: Optional[str] = None) -> int:
    """Dispatch parsed arguments to help, version, or transcoding.

    Args:
        args: Parsed arguments from build_parser().
        prog: Executable name shown in the help text; defaults to the
              basename of argv[0].

    Returns:
        The process exit status.
    """
    if args.params:
        _status("Error: no positional parameters allowed")
        return EXIT_FAILURE

    if args.show_help:
        print(help_text(prog or os.path.basename(sys.argv[0])))
        return EXIT_OK

    if args.show_version:
        print(version_text())
        return EXIT_OK

    return _transcode(args)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Always exits via sys.exit with the run() status
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    sys.exit(run(args, prog=parser.prog))


if __name__ == "__main__":
    main()
