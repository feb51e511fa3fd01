"""Test d'intégration du flux complet (CLI, service simulé)."""

import json
from pathlib import Path

import pandas as pd

from conftest import FakeResponse, FakeSession
from gazettematch.cli import cmd_match, cmd_show, main
from gazettematch.client import MatchClient


def test_end_to_end_two_matches(tmp_path: Path, excel_path: Path, pdf_path: Path, two_matches, capsys) -> None:
    """Seuil 90, deux correspondances (100 et 92) : table numérotée, 2e ligne signalée, export identique."""
    out = tmp_path / "export.xlsx"
    http = FakeSession(FakeResponse(payload=two_matches))

    exit_code = cmd_match(
        str(excel_path),
        str(pdf_path),
        threshold=90,
        endpoint="http://localhost:5000/match",
        output_path=str(out),
        client=MatchClient(session=http),
    )

    assert exit_code == 0
    assert http.calls[0]["params"] == {"threshold": "90"}
    lines = capsys.readouterr().out.splitlines()
    assert lines[2].lstrip().startswith("1")
    assert lines[3].startswith("*")

    df = pd.read_excel(out, engine="openpyxl")
    assert list(df.columns) == ["No", "excelName", "gazetteMatch", "score"]
    assert df["No"].tolist() == [1, 2]
    assert df["excelName"].tolist() == ["Kwame Mensah", "Ama Owusu"]
    assert df["gazetteMatch"].tolist() == ["KWAME MENSAH", "AMA OWUSUA"]
    assert df["score"].tolist() == [100, 92]


def test_no_matches(excel_path: Path, pdf_path: Path, capsys) -> None:
    http = FakeSession(FakeResponse(payload={"matched": []}))
    exit_code = cmd_match(str(excel_path), str(pdf_path), client=MatchClient(session=http))
    assert exit_code == 0
    assert "No matches found." in capsys.readouterr().out


def test_server_error(excel_path: Path, pdf_path: Path, capsys) -> None:
    http = FakeSession(FakeResponse(status_code=500, payload={"error": "boom"}))
    exit_code = cmd_match(str(excel_path), str(pdf_path), client=MatchClient(session=http))
    assert exit_code == 1
    assert "An error occurred" in capsys.readouterr().out


def test_wrong_file_type_no_network(tmp_path: Path, pdf_path: Path, capsys) -> None:
    csv_path = tmp_path / "names.csv"
    csv_path.write_text("Name\nAma\n", encoding="utf-8")
    http = FakeSession()
    exit_code = cmd_match(str(csv_path), str(pdf_path), client=MatchClient(session=http))
    assert exit_code == 1
    assert http.calls == []
    assert "valid Excel file" in capsys.readouterr().out


def test_config_threshold_used(tmp_path: Path, excel_path: Path, pdf_path: Path, two_matches) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"endpoint": "http://localhost:5000/match", "threshold": 85}), encoding="utf-8")
    http = FakeSession(FakeResponse(payload=two_matches))
    cmd_match(str(excel_path), str(pdf_path), config_path=str(config_path), client=MatchClient(session=http))
    assert http.calls[0]["url"] == "http://localhost:5000/match"
    assert http.calls[0]["params"] == {"threshold": "85"}


def test_show_exported(tmp_path: Path, excel_path: Path, pdf_path: Path, two_matches, capsys) -> None:
    http = FakeSession(FakeResponse(payload=two_matches))
    cmd_match(str(excel_path), str(pdf_path), output_path=str(tmp_path), client=MatchClient(session=http))
    displayed = capsys.readouterr().out.splitlines()[:4]

    assert cmd_show(str(tmp_path / "Matched_Deceased_Names.xlsx")) == 0
    assert capsys.readouterr().out.splitlines() == displayed


def test_main_config_error_exit_code(excel_path: Path, pdf_path: Path) -> None:
    """La CLI retourne 1 et affiche un message en cas d'erreur de configuration."""
    exit_code = main(["match", "--excel", str(excel_path), "--pdf", str(pdf_path), "--config", "/chemin/inexistant.json"])
    assert exit_code == 1
