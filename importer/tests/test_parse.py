from __future__ import annotations

import logging

import pytest

from importer.parse import CourseImport, DepartmentImport, parse_csv, parse_json, parse_line, parse_units, parse_url

HEADER = "Númer;Heiti;Einingar;Kennslumisseri;Námstig;"


def test_parse_json_invalid_input_returns_empty_and_logs(caplog):
    with caplog.at_level(logging.ERROR, logger="importer"):
        assert parse_json("not json") == []
        assert parse_json(None) == []
    assert "error parsing JSON" in caplog.text


def test_parse_json_non_array_returns_empty():
    assert parse_json("null") == []
    assert parse_json('{"title": "t"}') == []


def test_parse_json_valid_entry_gets_slug():
    data = '[{"title": "Tölvunarfræðideild", "description": "description", "csv": "tolvunarfraedi.csv", "html": "x.html"}]'

    assert parse_json(data) == [
        DepartmentImport(
            title="Tölvunarfræðideild",
            slug="tolvunarfraedideild",
            description="description",
            csv="tolvunarfraedi.csv",
        )
    ]


def test_parse_json_skips_entries_missing_fields(caplog):
    with caplog.at_level(logging.WARNING, logger="importer"):
        assert parse_json('[{"title": "t"}]') == []
        assert parse_json("[1]") == []
        assert parse_json('[{"title": "t", "description": "", "csv": "t.csv"}]') == []
    assert "missing required properties in JSON" in caplog.text


def test_parse_json_keeps_order_and_valid_entries():
    data = (
        '[{"title": "B deild", "description": "b", "csv": "b.csv"},'
        ' {"title": "broken"},'
        ' {"title": "A deild", "description": "a", "csv": "a.csv"}]'
    )
    assert [item.slug for item in parse_json(data)] == ["b-deild", "a-deild"]


def test_parse_csv_empty_input():
    assert parse_csv("") == []
    assert parse_csv(None) == []


def test_parse_csv_parses_correct_data():
    data = f"{HEADER}\nID;Title;8;Haust;Grunnám;https://example.org/"

    assert parse_csv(data) == [
        CourseImport(
            course_id="ID",
            title="Title",
            units=8,
            semester="Haust",
            level="Grunnám",
            url="https://example.org/",
        )
    ]


def test_parse_csv_header_only_is_empty():
    assert parse_csv(HEADER) == []
    assert parse_csv("ID;Title;8;Haust;Grunnám;https://example.org/") == []


def test_parse_csv_skips_course_without_title():
    assert parse_csv(f"{HEADER}\nx;;;;;") == []


def test_parse_csv_skips_lines_missing_id_or_semester():
    data = f"{HEADER}\n;Title;8,5;Haust;;x\nID;Title;8;foo;;\nID2;Title 2"
    assert parse_csv(data) == []


def test_parse_csv_is_idempotent():
    data = f"{HEADER}\nA;One;6;Vor;;\nB;Two;7,5;Sumar;Framhaldsnám;http://example.org/b\n"
    assert parse_csv(data) == parse_csv(data)
    assert len(parse_csv(data)) == 2


def test_parse_line_drops_invalid_optional_fields():
    course = parse_line("ID;Title;8.5;Heilsárs;;not a url")

    assert course == CourseImport(course_id="ID", title="Title", units=None, semester="Heilsárs", level=None, url=None)


def test_parse_line_pads_short_lines():
    course = parse_line("ID;Title;6;Vor")
    assert course is not None
    assert course.level is None and course.url is None


def test_parse_line_handles_crlf():
    course = parse_line("ID;Title;6;Vor;Grunnám;https://example.org/a\r")
    assert course.url == "https://example.org/a"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("8", 8),
        ("7,5", 7.5),
        ("0,5", 0.5),
        ("8.5", None),
        ("1.000", None),
        ("07", None),
        ("8 ECTS", None),
        ("", None),
        (None, None),
        ("nan", None),
        ("Infinity", None),
    ],
)
def test_parse_units(raw, expected):
    assert parse_units(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("https://example.org/", "https://example.org/"),
        ("HTTPS://Example.org", "https://example.org/"),
        ("https://ugla.hi.is/kennsluskra/index.php?id=1", "https://ugla.hi.is/kennsluskra/index.php?id=1"),
        ("x", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_url(raw, expected):
    assert parse_url(raw) == expected
