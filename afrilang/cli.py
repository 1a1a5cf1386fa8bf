"""Command line entry points: run a ``.afr`` file or an interactive console."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence
from typing import TextIO

from .parser import Parser

_EXTENSION = ".afr"
_WELCOME = "Bienvenue dans Afrilang. Veuillez saisir vos lignes de code."
_PROMPT = ">> "
_USAGE = "Format d'entrée : './Afrilang' ou './Afrilang fileName'"


def _split_lines(content: str) -> list[str]:
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def run_file(file_name: str, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
    """Execute every line of an Afrilang file, sharing variables between lines."""
    err = stderr if stderr is not None else sys.stderr
    if not file_name.endswith(_EXTENSION):
        err.write("Erreur : Fichier non reconnu. L'extention doit être '.afr'\n")
        return
    try:
        with open(file_name, encoding="utf-8", errors="surrogateescape", newline="") as source:
            content = source.read()
    except OSError:
        err.write(f"Erreur lors de l'ouverture du fichier : '{file_name}'\n")
        return
    parser = Parser(stdout, stderr)
    for line in _split_lines(content):
        parser.run_line(line)


def _clear_screen(out: TextIO) -> None:
    isatty = getattr(out, "isatty", None)
    if isatty is None or not isatty():
        return
    out.flush()
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def run_console(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """Read and execute lines until one is exactly ``quit`` or input ends."""
    source = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout
    parser = Parser(stdout, stderr)
    _clear_screen(out)
    out.write(f"\n{_WELCOME}\n\n")
    code = ""
    while code != "quit":
        out.write(_PROMPT)
        out.flush()
        raw = source.readline()
        if not raw:
            return
        code = raw[:-1] if raw.endswith("\n") else raw
        parser.run_line(code)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the console with no argument, or run the file given as the only argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if not args:
            run_console()
        elif len(args) == 1:
            run_file(args[0])
        else:
            sys.stderr.write(_USAGE + "\n")
    except ValueError as exc:
        sys.stderr.write(f"Erreur : {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())