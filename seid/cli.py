"""Run a Seid program from a file, or interactively from a prompt."""

import argparse
import os
import sys
from typing import List, Optional, TextIO

from seid.error.error import SeidSyntaxError, UsageError
from seid.parser.parser import Parser
from seid.scanner.scanner import Scanner
from seid.token import Token
from seid.tree.printer import AstPrinter
from seid.util import Colors

PROMPT = "(seid) > "
EXIT_COMMAND = "exit()"
DEFAULT_HISTORY = os.path.join("~", ".seid_history")

# Exit statuses, following sysexits.h
EX_OK = 0
EX_DATAERR = 65
EX_NOINPUT = 66


class Seid:
    def __init__(
        self,
        show_tokens: bool = False,
        color: bool = False,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self.show_tokens = show_tokens
        self.color = Colors.RED if color else None
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def run(self, program: str | bytes) -> None:
        scanner = Scanner(program)
        tokens = scanner.scan()

        if self.show_tokens:
            for token in tokens:
                print(self.format_token(token), file=self.out)
            return

        parser = Parser(tokens, scanner.og_program)
        tree = parser.parse()
        print(AstPrinter().print(tree, scanner.og_program), file=self.out)

    def run_file(self, path: str) -> int:
        try:
            with open(path, "rb") as f:
                program = f.read()
        except OSError as e:
            raise UsageError(f"could not read file `{path}`: {e.strerror}") from e

        try:
            self.run(program)
        except SeidSyntaxError as e:
            self.report(e)
            return EX_DATAERR
        return EX_OK

    def run_prompt(self, history_path: str = DEFAULT_HISTORY) -> int:
        import readline

        history_path = os.path.expanduser(history_path)
        if os.path.exists(history_path):
            readline.read_history_file(history_path)

        while True:
            try:
                line = input(PROMPT)
            except KeyboardInterrupt:
                print(f'\nType "{EXIT_COMMAND}" to exit', file=self.out)
                continue
            except EOFError:
                print(file=self.out)
                break

            if line.strip() == EXIT_COMMAND:
                break
            if not line.strip():
                continue

            try:
                self.run(line)
            except SeidSyntaxError as e:
                self.report(e)

        try:
            readline.write_history_file(history_path)
        except OSError as e:
            print(f"Could not save history to `{history_path}`: {e.strerror}", file=self.err)
        return EX_OK

    def report(self, exception: SeidSyntaxError) -> None:
        print(exception.error.create_error(color=self.color), file=self.err)

    @staticmethod
    def format_token(token: Token) -> str:
        return f"{token.type.name} {token.text!r} {token.literal!r}"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="seid", description="Scan and parse Seid expressions."
    )
    parser.add_argument(
        "file", nargs="?", help="path to a Seid file; starts a prompt if omitted"
    )
    parser.add_argument(
        "--tokens", action="store_true", help="print the tokens instead of the tree"
    )
    parser.add_argument(
        "--history",
        default=DEFAULT_HISTORY,
        help=f"prompt history file (default: {DEFAULT_HISTORY})",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="do not highlight errors"
    )
    args = parser.parse_args(argv)

    seid = Seid(
        show_tokens=args.tokens,
        color=not args.no_color and sys.stderr.isatty(),
    )
    if args.file is None:
        return seid.run_prompt(args.history)

    try:
        return seid.run_file(args.file)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EX_NOINPUT
