"""Tests de la projection en table."""

from gazettematch.schema import MatchRecord
from gazettematch.table import column_labels, display_columns, display_rows, format_table, format_value


def _records() -> list[MatchRecord]:
    return [
        MatchRecord.from_dict({"excelName": "Kwame Mensah", "gazetteMatch": "KWAME MENSAH", "score": 100}),
        MatchRecord.from_dict({"excelName": "Ama Owusu", "gazetteMatch": "AMA OWUSUA", "score": 92}),
    ]


def test_columns_numbered_then_fields() -> None:
    assert display_columns(_records()) == ["No", "excelName", "gazetteMatch", "score"]


def test_columns_union_in_encounter_order() -> None:
    records = [
        MatchRecord.from_dict({"nameOfTheDeceased": "a", "score": 100}),
        MatchRecord.from_dict({"nameOfTheDeceased": "b", "gazetteDate": "2023-01-01", "score": 95}),
    ]
    assert display_columns(records) == ["No", "nameOfTheDeceased", "score", "gazetteDate"]
    rows = display_rows(records)
    assert rows[0].values == [1, "a", 100, ""]


def test_rows_numbered_and_flagged() -> None:
    rows = display_rows(_records())
    assert [r.number for r in rows] == [1, 2]
    assert [r.flagged for r in rows] == [False, True]
    assert rows[1].values == [2, "Ama Owusu", "AMA OWUSUA", 92]


def test_format_table_marks_inexact() -> None:
    lines = format_table(_records()).splitlines()
    assert lines[0].split() == ["No", "|", "excelName", "|", "gazetteMatch", "|", "score"]
    assert not lines[2].startswith("*")
    assert lines[3].startswith("*")
    assert "AMA OWUSUA" in lines[3]


def test_format_table_float_score() -> None:
    records = [MatchRecord.from_dict({"excelName": "a", "score": 100.0})]
    assert format_table(records).splitlines()[2].rstrip().endswith("100")


def test_column_labels_avoid_number_column() -> None:
    assert column_labels(["excelName", "score"]) == ["excelName", "score"]
    assert column_labels(["No", "score"]) == ["No_1", "score"]
    assert column_labels(["No", "No_1", "score"]) == ["No_2", "No_1", "score"]


def test_rows_keep_number_with_no_field() -> None:
    records = [MatchRecord.from_dict({"No": "X-17", "excelName": "a", "score": 100})]
    assert display_columns(records) == ["No", "No_1", "excelName", "score"]
    assert display_rows(records)[0].values == [1, "X-17", "a", 100]


def test_format_value_non_scalar() -> None:
    assert format_value(["a", "b"]) == '["a", "b"]'
    assert format_value({"page": 3}) == '{"page": 3}'
