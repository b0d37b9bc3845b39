"""Line search and content display for plain files and ZIP archives."""

from __future__ import annotations

import logging
import os
import stat
import sys
import zipfile
from collections.abc import Iterable, Iterator
from typing import BinaryIO, TextIO

from filescout.domain import SearchRequest

_log = logging.getLogger(__name__)

_ALLOWED_CONTROL = frozenset(b"\t\n\r\f")
_READ_ERRORS = (OSError, zipfile.BadZipFile, RuntimeError, NotImplementedError)


def _is_zip(path: str) -> bool:
    return path.lower().endswith(".zip")


def _lines(stream: BinaryIO) -> Iterator[str]:
    for raw in stream:
        yield raw.rstrip(b"\n").removesuffix(b"\r").decode("utf-8", errors="replace")


def _matching(stream: BinaryIO, term: str, ignore_case: bool) -> Iterator[tuple[int, str]]:
    needle = term.lower() if ignore_case else term
    for number, line in enumerate(_lines(stream), start=1):
        if needle in (line.lower() if ignore_case else line):
            yield number, line


def _emit(out: TextIO, number: int, line: str, show_line_numbers: bool) -> None:
    out.write(f"{number}: {line}\n" if show_line_numbers else f"{line}\n")


def parse_extensions(spec: str) -> list[str]:
    """Split a comma separated extension list, lower-cased."""
    return spec.lower().split(",")


def has_valid_extension(file_path: str, extensions: Iterable[str]) -> bool:
    """Tell whether the file's extension is listed; an empty list accepts all."""
    wanted = list(extensions)
    if not wanted or wanted == [""]:
        return True
    name = os.path.basename(file_path)
    ext = name[name.rfind("."):].lower() if "." in name else ""
    return any(ext == item.strip() for item in wanted)


def is_text(content: bytes) -> bool:
    """Tell whether ``content`` looks like text rather than binary data."""
    if not content:
        return True
    control = sum(1 for byte in content if byte < 32 and byte not in _ALLOWED_CONTROL)
    return control / len(content) <= 0.05


def zip_contains(zip_path: str, term: str, ignore_case: bool) -> bool:
    """Tell whether any member of the archive holds a line with ``term``."""
    try:
        with zipfile.ZipFile(zip_path) as archive:
            for info in archive.infolist():
                try:
                    with archive.open(info) as member:
                        if any(_matching(member, term, ignore_case)):
                            return True
                except _READ_ERRORS:
                    continue
    except (OSError, zipfile.BadZipFile):
        pass
    return False


def file_contains(file_path: str, term: str, ignore_case: bool) -> bool:
    """Tell whether the file (or ZIP archive) holds a line with ``term``."""
    if _is_zip(file_path):
        return zip_contains(file_path, term, ignore_case)
    try:
        with open(file_path, "rb") as handle:
            return any(_matching(handle, term, ignore_case))
    except OSError:
        return False


def search_in_zip_file(
    zip_path: str,
    term: str,
    ignore_case: bool,
    show_line_numbers: bool,
    out: TextIO | None = None,
) -> bool:
    """Print matching lines of every archive member; return whether any matched."""
    out = out or sys.stdout
    try:
        archive = zipfile.ZipFile(zip_path)
    except (OSError, zipfile.BadZipFile) as exc:
        _log.error("Ошибка открытия ZIP-архива %s: %s", zip_path, exc)
        return False
    any_found = False
    with archive:
        for info in archive.infolist():
            try:
                member = archive.open(info)
            except _READ_ERRORS as exc:
                _log.error("Ошибка открытия файла %s в архиве %s: %s", info.filename, zip_path, exc)
                continue
            file_found = False
            try:
                with member:
                    for number, line in _matching(member, term, ignore_case):
                        if not file_found:
                            out.write(
                                "\n=== Найдено в файле внутри архива: "
                                f"{zip_path}/{info.filename} ===\n"
                            )
                            file_found = any_found = True
                        _emit(out, number, line, show_line_numbers)
            except _READ_ERRORS:
                pass
    return any_found


def search_in_file(
    file_path: str,
    term: str,
    ignore_case: bool,
    show_line_numbers: bool,
    out: TextIO | None = None,
) -> bool:
    """Print the lines of the file that hold ``term``; return whether any did."""
    if _is_zip(file_path):
        return search_in_zip_file(file_path, term, ignore_case, show_line_numbers, out)
    out = out or sys.stdout
    found = False
    try:
        with open(file_path, "rb") as handle:
            for number, line in _matching(handle, term, ignore_case):
                found = True
                _emit(out, number, line, show_line_numbers)
    except OSError as exc:
        _log.error("Ошибка чтения файла %s: %s", file_path, exc)
    return found


def print_zip_content(zip_path: str, out: TextIO | None = None) -> None:
    """List the members of a ZIP archive with their uncompressed sizes."""
    out = out or sys.stdout
    try:
        archive = zipfile.ZipFile(zip_path)
    except (OSError, zipfile.BadZipFile) as exc:
        _log.error("Ошибка открытия ZIP-архива %s: %s", zip_path, exc)
        return
    with archive:
        out.write(f"Содержимое ZIP-архива: {zip_path}\n")
        for info in archive.infolist():
            out.write(f"  {info.filename} (размер: {info.file_size} байт)\n")


def print_file_content(file_path: str, out: TextIO | None = None) -> None:
    """Print a text file, a notice for a binary file, or an archive listing."""
    if _is_zip(file_path):
        print_zip_content(file_path, out)
        return
    out = out or sys.stdout
    try:
        with open(file_path, "rb") as handle:
            content = handle.read()
    except OSError as exc:
        _log.error("Ошибка чтения файла %s: %s", file_path, exc)
        return
    if is_text(content):
        out.write(content.decode("utf-8", errors="replace") + "\n")
    else:
        out.write("Файл не является текстовым (бинарный файл).\n")


def _walk(path: str, recursive: bool, top: bool = True) -> Iterator[tuple[str, os.stat_result]]:
    info = os.lstat(path)
    if not stat.S_ISDIR(info.st_mode):
        yield path, info
    elif top or recursive:
        for name in sorted(os.listdir(path)):
            yield from _walk(os.path.normpath(os.path.join(path, name)), recursive, False)


def search_in_directory(request: SearchRequest, out: TextIO | None = None) -> None:
    """Search or print every regular file under ``request.path``.

    Raises OSError when the directory tree cannot be read.
    """
    out = out or sys.stdout
    term = request.search_term
    for path, info in _walk(request.path, request.recursive):
        if not stat.S_ISREG(info.st_mode) or not has_valid_extension(path, request.extensions):
            continue
        if not term:
            out.write(f"\n=== Содержимое файла: {path} ===\n")
            print_file_content(path, out)
            continue
        if request.only_show_match:
            if not file_contains(path, term, request.ignore_case):
                continue
            out.write(f"\n=== Найдено в файле: {path} ===\n")
        else:
            out.write(f"\n=== Поиск в файле: {path} ===\n")
        search_in_file(path, term, request.ignore_case, request.show_line_nums, out)