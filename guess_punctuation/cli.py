"""Command-line entry point for guess-punctuation."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
import logging
from pathlib import Path
import sys
from typing import Iterable, List, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from .config import Level, make_config
from .guesser import PunctuationGuesser


@dataclass
class _LineChange:
    path: Path
    line: int
    before: str
    after: str


def main(argv: Iterable[str] | None = None) -> int:
    """Execute the command-line interface.

    Args:
        argv: Optional iterable overriding ``sys.argv``.

    Returns:
        Exit code (zero on success, non-zero on error, misuse or pending
        changes reported by ``check``).
    """
    parser = argparse.ArgumentParser(
        prog="guess-punctuation",
        description="Replace ASCII punctuation by its preferred Unicode counterpart.",
    )
    subparsers = parser.add_subparsers(dest="command")
    common = _common_options()

    _configure_guess_parser(subparsers, common)
    _configure_check_parser(subparsers, common)
    _configure_fix_parser(subparsers, common)

    args = parser.parse_args(list(argv) if argv is not None else None)

    if not getattr(args, "handler", None):
        parser.print_help(sys.stderr)
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    return args.handler(args)


def _common_options() -> argparse.ArgumentParser:
    """Return the parent parser holding the options shared by every command."""

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-l",
        "--locale",
        help="Language of the text as ISO 639-1 code or locale (e.g. fr, de_AT).",
    )
    common.add_argument(
        "--script",
        help="ISO 15924 script of the text (e.g. Hebr, Latn).",
    )
    common.add_argument(
        "-m",
        "--preserve-markup",
        action="store_true",
        help="Keep links, URLs and ''italic''/'''bold''' markup untouched.",
    )
    common.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="RULE",
        help="Skip the named rule (repeatable).",
    )
    common.add_argument(
        "--warn",
        action="append",
        default=[],
        metavar="RULE",
        help="Only report what the named rule would change (repeatable).",
    )
    common.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    return common


def _configure_guess_parser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> None:
    """Register the ``guess`` sub-command printing transformed text."""

    guess_parser = subparsers.add_parser(
        "guess",
        parents=[common],
        help="Print the given text (or stdin) with guessed punctuation.",
    )
    guess_parser.add_argument("text", nargs="*", help="Text to transform.")
    guess_parser.set_defaults(handler=_run_guess)


def _configure_check_parser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> None:
    """Register the ``check`` sub-command displaying pending changes."""

    check_parser = subparsers.add_parser(
        "check",
        parents=[common],
        help="List the changes that would be applied to the given files.",
    )
    _add_path_arguments(check_parser)
    check_parser.add_argument(
        "--summary",
        action="store_true",
        help="Display the pending changes as a table.",
    )
    check_parser.set_defaults(handler=_run_check)


def _configure_fix_parser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> None:
    """Register the ``fix`` sub-command rewriting files in-place."""

    fix_parser = subparsers.add_parser(
        "fix",
        parents=[common],
        help="Rewrite the given files with guessed punctuation.",
    )
    _add_path_arguments(fix_parser)
    fix_parser.set_defaults(handler=_run_fix)


def _add_path_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "paths", nargs="+", type=Path, help="Files or directories to process."
    )
    parser.add_argument(
        "--pattern",
        default="*.txt",
        help="Glob selecting the files inside directories (default: *.txt).",
    )


def _build_guesser(args: argparse.Namespace) -> PunctuationGuesser:
    """Instantiate a guesser configured from the command-line options."""

    levels = {name: Level.ignore for name in args.ignore}
    levels.update({name: Level.warn for name in args.warn})
    config = make_config(
        locale=args.locale,
        script=args.script,
        preserve_markup=args.preserve_markup,
        levels=levels,
        summary=getattr(args, "summary", False),
    )
    return PunctuationGuesser(config)


def _run_guess(args: argparse.Namespace) -> int:
    """Print the guessed form of each argument, or of stdin without arguments."""

    guesser = _build_guesser(args)
    if args.text:
        for text in args.text:
            print(guesser.guess(text))
        return 0

    sys.stdout.write(guesser.process(sys.stdin.read(), source="<stdin>")[0])
    return 0


def _run_check(args: argparse.Namespace) -> int:
    """Display the changes that would be applied without modifying files."""

    files = _collect_files(args.paths, args.pattern)
    if files is None:
        return 1

    guesser = _build_guesser(args)
    changes: List[_LineChange] = []
    for path in files:
        original = path.read_text(encoding="utf-8")
        fixed, _ = guesser.process(original, source=_format_relative(path))
        file_changes = _changed_lines(path, original, fixed)
        if not file_changes:
            continue

        changes.extend(file_changes)
        print(f"{_format_relative(path)}:")
        for change in file_changes:
            print(f"  - line {change.line}: «{change.before}» → «{change.after}»")

    if not changes:
        print("No changes needed.")
        return 0

    if guesser.config.summary:
        _print_summary(changes)
    return 1


def _run_fix(args: argparse.Namespace) -> int:
    """Apply the guessed punctuation in-place."""

    files = _collect_files(args.paths, args.pattern)
    if files is None:
        return 1

    guesser = _build_guesser(args)
    updated_files: List[Path] = []
    for path in files:
        original = path.read_text(encoding="utf-8")
        fixed, _ = guesser.process(original, source=_format_relative(path))
        if original == fixed:
            continue
        path.write_text(fixed, encoding="utf-8")
        updated_files.append(path)
        line_count = len(_changed_lines(path, original, fixed))
        print(f"Fixed: {_format_relative(path)} ({line_count} line(s) changed)")

    if not updated_files:
        print("No changes applied: the files already use Unicode punctuation.")
    else:
        print(f"{len(updated_files)} file(s) updated.")
    return 0


def _changed_lines(path: Path, original: str, fixed: str) -> List[_LineChange]:
    """Return the lines which differ between the original and the fixed text.

    The rules never add or remove line breaks, so lines can be paired up.
    """
    return [
        _LineChange(path=path, line=index, before=before, after=after)
        for index, (before, after) in enumerate(
            zip(original.splitlines(), fixed.splitlines()), start=1
        )
        if before != after
    ]


def _print_summary(changes: Sequence[_LineChange]) -> None:
    """Display a formatted summary of the pending changes."""

    table = Table(
        title="Pending punctuation changes",
        title_style="bold bright_white",
        header_style="bold magenta",
        show_lines=True,
        box=box.ROUNDED,
        border_style="grey50",
        row_styles=["grey35", ""],
        pad_edge=False,
        padding=(0, 1),
    )
    table.add_column("Location", style="green", no_wrap=True)
    table.add_column("Before", style="white")
    table.add_column("After", style="cyan")

    for change in changes:
        table.add_row(
            f"{_format_relative(change.path)}:{change.line}",
            change.before,
            change.after,
        )

    console = Console()
    console.print(table)


def _collect_files(paths: Sequence[Path], pattern: str) -> List[Path] | None:
    """Expand directories into the matching files, ``None`` if a path is missing."""

    files: List[Path] = []
    for path in paths:
        if not path.exists():
            print(f"Path not found: {path}", file=sys.stderr)
            return None
        if path.is_dir():
            files.extend(
                sorted(entry for entry in path.rglob(pattern) if entry.is_file())
            )
        else:
            files.append(path)
    return files


def _format_relative(path: Path) -> str:
    """Return a path relative to the current working directory when possible."""
    root = Path.cwd().resolve()
    abs_path = path.resolve()
    try:
        return str(abs_path.relative_to(root))
    except ValueError:
        return str(abs_path)
