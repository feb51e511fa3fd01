"""Fixtures communes : fichiers d'entrée et faux service HTTP."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd
import pytest
import requests

from gazettematch.validation import UploadFile


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def json(self) -> Any:
        if self._text is not None:
            raise requests.exceptions.JSONDecodeError("Expecting value", self._text, 0)
        return self._payload


class FakeSession:
    """Remplace requests.Session : enregistre les appels, renvoie une réponse préparée."""

    def __init__(self, response: FakeResponse | None = None, exc: Exception | None = None) -> None:
        self.response = response or FakeResponse(payload={"matched": []})
        self.exc = exc
        self.calls: list[dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self) -> None:
        pass


@pytest.fixture
def excel_path(tmp_path: Path) -> Path:
    path = tmp_path / "names.xlsx"
    pd.DataFrame({"Name": ["Kwame Mensah", "Ama Owusu"]}).to_excel(path, index=False, engine="openpyxl")
    return path


@pytest.fixture
def pdf_path(tmp_path: Path) -> Path:
    path = tmp_path / "gazette.pdf"
    path.write_bytes(b"%PDF-1.4\n%fake gazette\n%%EOF\n")
    return path


@pytest.fixture
def excel_file(excel_path: Path) -> UploadFile:
    return UploadFile.from_path(excel_path)


@pytest.fixture
def pdf_file(pdf_path: Path) -> UploadFile:
    return UploadFile.from_path(pdf_path)


@pytest.fixture
def two_matches() -> dict[str, Any]:
    return {
        "matched": [
            {"excelName": "Kwame Mensah", "gazetteMatch": "KWAME MENSAH", "score": 100},
            {"excelName": "Ama Owusu", "gazetteMatch": "AMA OWUSUA", "score": 92},
        ]
    }
