"""
Command-line driver for the Lox scanner.

    lox            interactive prompt, one scan per line
    lox SCRIPT     scan a whole file

Tokens go to stdout, diagnostics to stderr. Exit codes follow the BSD
sysexits convention.
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from . import __version__
from .lexer import Diagnostic, ScanResult, scan

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 64      # EX_USAGE
EXIT_DATAERR = 65    # EX_DATAERR
EXIT_NOINPUT = 66    # EX_NOINPUT

USAGE = "Usage: lox [script]"
PROMPT = "> "
BANNER = "Lox REPL"


class UsageError(Exception):
    """Wrong command-line arguments; raised before any scanning."""


def report(diagnostics: Iterable[Diagnostic], stream: Optional[TextIO] = None):
    """Write diagnostics in ``[line N] Error: message`` form."""
    stream = stream if stream is not None else sys.stderr
    for diagnostic in diagnostics:
        print(diagnostic, file=stream)


def run(source: str, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> ScanResult:
    """Scan ``source``, print its tokens and report its diagnostics."""
    out = out if out is not None else sys.stdout
    result = scan(source)
    report(result.diagnostics, err)
    for token in result.tokens:
        print(token, file=out)
    return result


def run_file(path: str, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Scan one file; returns the process exit code."""
    err = err if err is not None else sys.stderr
    try:
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()
    except OSError as e:
        print(f"Could not read {path}: {e.strerror or e}", file=err)
        return EXIT_NOINPUT
    except UnicodeDecodeError as e:
        print(f"Could not read {path}: not valid UTF-8 ({e.reason} at byte {e.start})", file=err)
        return EXIT_NOINPUT

    logger.debug("scanning %s (%d chars)", path, len(source))
    result = run(source, out, err)
    return EXIT_DATAERR if result.had_error else EXIT_OK


def run_prompt(inp: Optional[TextIO] = None, out: Optional[TextIO] = None,
               err: Optional[TextIO] = None) -> int:
    """
    Read-scan-print loop.

    Each line is scanned on its own; errors are reported and forgotten,
    so a bad line never ends the session. Returns on end of input or Ctrl-C.
    """
    inp = inp if inp is not None else sys.stdin
    out = out if out is not None else sys.stdout

    print(BANNER, file=out)
    while True:
        print(PROMPT, end="", file=out, flush=True)
        try:
            line = inp.readline()
        except KeyboardInterrupt:
            line = ""
        if not line:
            print(file=out)
            break
        run(line.rstrip("\n"), out, err)
    return EXIT_OK


class LoxArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad command lines as UsageError instead of exiting 2."""

    def error(self, message):
        raise UsageError(f"{self.prog}: error: {message}\n{USAGE}")


def build_parser() -> argparse.ArgumentParser:
    parser = LoxArgumentParser(
        prog="lox",
        description="Scan Lox source and print its tokens.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    lox                 # Interactive prompt
    lox hello.lox       # Scan a file
    lox -v hello.lox    # Scan with debug logging
        """
    )
    # nargs='*' so a wrong count can be reported with our own exit code
    parser.add_argument('script', nargs='*', help='Lox source file to scan')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging on stderr')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    args = build_parser().parse_args(argv)
    if len(args.script) > 1:
        raise UsageError(USAGE)
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the ``lox`` command."""
    try:
        args = parse_args(argv)
    except UsageError as e:
        print(e, file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.script:
        return run_file(args.script[0])
    return run_prompt()


if __name__ == "__main__":
    sys.exit(main())
