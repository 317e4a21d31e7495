import argparse
import logging
import sys
from typing import TextIO

from pipescript import ls
from pipescript.config.settings import settings
from pipescript.entities.Files import Files


def _print_long(files: Files, out: TextIO) -> None:
    for f in files.entries:
        mtime = f.mod_time.astimezone().strftime("%Y-%m-%d %H:%M")
        out.write(f"{f.metadata.permissions} {f.size:>10} {mtime} {f.path}\n")


def _print_pretty(files: Files) -> None:
    from rich import box
    from rich.console import Console
    from rich.table import Table
    from rich.text import Text

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("mode")
    table.add_column("size", justify="right")
    table.add_column("modified")
    table.add_column("path", style="cyan")
    for f in files.entries:
        path = Text(f.path, style="bold blue" if f.is_dir else "")
        table.add_row(
            f.metadata.permissions,
            str(f.size),
            f.mod_time.astimezone().strftime("%Y-%m-%d %H:%M"),
            path,
        )
    Console(soft_wrap=True).print(table)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pipescript-ls",
        description="List files, one path per line, through a pipescript stream.",
    )
    parser.add_argument("paths", nargs="*", help="Files or directories (default: .)")
    parser.add_argument(
        "-l",
        "--long",
        action="store_true",
        help="Print mode, size and modification time before each path",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Render entries as a table with colors",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    files = ls(*args.paths)
    if args.pretty:
        _print_pretty(files)
    elif args.long:
        _print_long(files, sys.stdout)
    else:
        sys.stdout.flush()
        files.stream.to(sys.stdout.buffer)
        sys.stdout.buffer.flush()

    for err in files.errors:
        print(f"pipescript-ls: {err}", file=sys.stderr)
    return 1 if files.errors else 0


if __name__ == "__main__":
    sys.exit(main())
