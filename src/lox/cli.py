"""Command-line entry point for Lox."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .errors import Diagnostics, UsageError
from .scanner import Scanner
from .token import Token

logger = logging.getLogger(__name__)

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


#argparse exits with status 2 on bad input; route it through UsageError instead
class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(f"{self.format_usage().strip()}\n{self.prog}: error: {message}")


#scans one unit of input and echoes tokens and diagnostics
def run(source: str, diagnostics: Diagnostics, out: TextIO, err: TextIO) -> List[Token]:
    tokens = Scanner(source, diagnostics).scan_tokens()
    for token in tokens:
        print(token, file=out)
    for diagnostic in diagnostics:
        print(diagnostic, file=err)
    return tokens


#handles `lox script`: one scan, status 65 when anything was reported;
#undecodable bytes become U+FFFD and are reported as unexpected characters
def run_file(path: Path, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        source = path.read_text(errors="replace")
    except OSError as exc:
        print(f"lox: cannot read {path}: {exc.strerror or exc}", file=err)
        return EX_NOINPUT

    logger.debug("scanning %s (%d characters)", path, len(source))
    diagnostics = Diagnostics()
    run(source, diagnostics, out, err)
    return EX_DATAERR if diagnostics.had_error else EX_OK


#interactive loop; every line is scanned on its own with a reset collector
def run_prompt(
    prompt: str = "> ",
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    err = err or sys.stderr
    diagnostics = Diagnostics()
    while True:
        print(prompt, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            print(file=out)
            break
        run(line.rstrip("\n"), diagnostics, out, err)
        diagnostics.reset()
    return EX_OK


#single optional script plus prompt and verbosity switches
def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="lox", description="Scan Lox source into tokens")
    parser.add_argument("script", nargs="?", help="path to a source file; omit for an interactive prompt")
    parser.add_argument("--prompt", default="> ", help="prompt shown in interactive mode")
    parser.add_argument("-v", "--verbose", action="store_true", help="log scanner activity to stderr")
    return parser


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


#`lox` console script and `python -m lox` both land here
def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        print(exc.message, file=sys.stderr)
        return exc.status

    if args.verbose:
        configure_logging()
    if args.script is not None:
        return run_file(Path(args.script))
    return run_prompt(args.prompt)


if __name__ == "__main__":
    raise SystemExit(main())
