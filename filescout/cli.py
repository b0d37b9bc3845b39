"""Command line entry point for searching files and archives."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from filescout.domain import SearchRequest
from filescout.search import (
    has_valid_extension,
    parse_extensions,
    print_file_content,
    search_in_directory,
    search_in_file,
)

USAGE = "Использование: filesearch [опции] <путь_к_файлу_или_директории>"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the search command."""
    parser = argparse.ArgumentParser(prog="filesearch", add_help=True)
    parser.add_argument("-s", dest="search_term", default="", help="Строка для поиска")
    parser.add_argument(
        "-i", dest="ignore_case", action="store_true", help="Игнорировать регистр при поиске"
    )
    parser.add_argument(
        "-n", dest="line_numbers", action="store_true", help="Показывать номера строк"
    )
    parser.add_argument(
        "-r", dest="recursive", action="store_true", help="Рекурсивный поиск в поддиректориях"
    )
    parser.add_argument(
        "-o",
        dest="matches_only",
        action="store_true",
        help="Показывать только файлы с совпадениями",
    )
    parser.add_argument(
        "-ext",
        "--ext",
        dest="extensions",
        default="",
        help="Фильтр по расширениям файлов (через запятую, например '.html,.txt,.zip')",
    )
    parser.add_argument("paths", nargs="*", help="Путь к файлу или директории")
    return parser


def run(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Run the search with ``argv`` and write results to ``out``; return the exit code."""
    out = sys.stdout if out is None else out
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.paths:
        out.write(f"{USAGE}\nОпции:\n")
        sys.stderr.write(parser.format_help())
        return 0

    path = args.paths[0]
    extensions = parse_extensions(args.extensions)

    try:
        is_dir = os.path.isdir(path) if os.stat(path) else False
    except OSError as exc:
        sys.stderr.write(f"Ошибка: {exc}\n")
        return 1

    if is_dir:
        request = SearchRequest(
            path=path,
            search_term=args.search_term,
            extensions=extensions,
            ignore_case=args.ignore_case,
            show_line_nums=args.line_numbers,
            recursive=args.recursive,
            only_show_match=args.matches_only,
        )
        try:
            search_in_directory(request, out)
        except OSError as exc:
            sys.stderr.write(f"Ошибка при обходе директории: {exc}\n")
            return 1
        return 0

    if not has_valid_extension(path, extensions):
        out.write(f"Файл {path} не соответствует указанным расширениям\n")
        return 0

    if args.search_term:
        out.write(f"=== Поиск в файле: {path} ===\n")
        found = search_in_file(
            path, args.search_term, args.ignore_case, args.line_numbers, out
        )
        if not found and not args.matches_only:
            out.write("Совпадений не найдено.\n")
    else:
        print_file_content(path, out)
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Console entry point."""
    logging.basicConfig(format="%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S")
    sys.exit(run(argv))


if __name__ == "__main__":
    main()