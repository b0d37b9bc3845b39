import io

import pytest

from filescout.cli import USAGE, build_parser, run


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("first line\nSecond Line\n")
    return path


def test_no_arguments_prints_usage():
    out = io.StringIO()
    assert run([], out) == 0
    assert out.getvalue().startswith(USAGE)


def test_parser_reads_flags():
    args = build_parser().parse_args(["-s", "x", "-i", "-n", "-r", "-o", "-ext", ".TXT", "p"])
    assert args.search_term == "x"
    assert args.ignore_case and args.line_numbers and args.recursive and args.matches_only
    assert args.extensions == ".TXT"
    assert args.paths == ["p"]


def test_missing_path_is_error(tmp_path, capsys):
    assert run([str(tmp_path / "absent")], io.StringIO()) == 1
    assert capsys.readouterr().err.startswith("Ошибка: ")


def test_search_in_single_file(sample):
    out = io.StringIO()
    assert run(["-s", "line", "-i", "-n", str(sample)], out) == 0
    assert out.getvalue() == (
        f"=== Поиск в файле: {sample} ===\n1: first line\n2: Second Line\n"
    )


def test_no_match_message(sample):
    out = io.StringIO()
    run(["-s", "absent", str(sample)], out)
    assert out.getvalue().endswith("Совпадений не найдено.\n")


def test_no_match_message_suppressed_with_only_matches(sample):
    out = io.StringIO()
    run(["-s", "absent", "-o", str(sample)], out)
    assert out.getvalue() == f"=== Поиск в файле: {sample} ===\n"


def test_extension_mismatch(sample):
    out = io.StringIO()
    assert run(["-ext", ".md", str(sample)], out) == 0
    assert out.getvalue() == f"Файл {sample} не соответствует указанным расширениям\n"


def test_print_content_without_term(sample):
    out = io.StringIO()
    run([str(sample)], out)
    assert out.getvalue() == sample.read_text() + "\n"


def test_directory_search(tmp_path, sample):
    out = io.StringIO()
    assert run(["-s", "first", "-o", str(tmp_path)], out) == 0
    assert f"=== Найдено в файле: {sample} ===" in out.getvalue()
    assert "first line" in out.getvalue()