"""Core data types and interfaces shared by the search front ends."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass
class SearchRequest:
    path: str
    search_term: str = ""
    extensions: list[str] = field(default_factory=list)
    ignore_case: bool = False
    show_line_nums: bool = False
    recursive: bool = False
    only_show_match: bool = False


@dataclass
class Match:
    line_number: int
    content: str


@dataclass
class SearchResult:
    file_path: str
    matches: list[Match] = field(default_factory=list)
    error: str = ""


@dataclass
class FileContent:
    name: str
    content: str
    is_binary: bool = False


@runtime_checkable
class DataExtractor(Protocol):
    """Pulls named values out of an HTML document."""

    def extract_values(self, html_content: str) -> dict[str, str]: ...


@runtime_checkable
class FileRepository(Protocol):
    """A source of files that can be searched and read."""

    def search_in_file(self, path: str, request: SearchRequest) -> SearchResult: ...

    def get_file_content(self, path: str) -> FileContent: ...

    def list_files(
        self, dir_path: str, recursive: bool, extensions: list[str]
    ) -> list[str]: ...