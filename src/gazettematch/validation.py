"""Fichiers à téléverser et validation des types déclarés."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass, field
from pathlib import Path

from gazettematch.config import GazetteMatchError

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PDF_MIME = "application/pdf"

EXCEL_MIME_TYPES = frozenset({XLSX_MIME})
PDF_MIME_TYPES = frozenset({PDF_MIME})

EXCEL_ERROR_MESSAGE = "Please upload a valid Excel file (.xlsx)."
PDF_ERROR_MESSAGE = "Please upload a valid PDF file."

# mimetypes ne connaît pas toujours .xlsx (dépend de la plateforme)
_KNOWN_TYPES = {
    ".xlsx": XLSX_MIME,
    ".pdf": PDF_MIME,
}


class InputValidationError(GazetteMatchError):
    """Fichier absent ou de type non accepté."""

    def __init__(self, message: str, field_name: str) -> None:
        super().__init__(message)
        self.field_name = field_name


@dataclass(frozen=True)
class UploadFile:
    """Fichier sélectionné par l'utilisateur, avec son type déclaré."""

    path: Path
    media_type: str
    name: str = field(default="")

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.path.name)

    @classmethod
    def from_path(cls, path: str | Path, media_type: str | None = None) -> UploadFile:
        """Crée un UploadFile en déduisant le type de l'extension si non fourni."""
        p = Path(path)
        if media_type is None:
            media_type = guess_media_type(p)
        return cls(path=p, media_type=media_type)

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()


def guess_media_type(path: str | Path) -> str:
    """Type MIME déclaré pour un chemin, comme le ferait un sélecteur de fichiers."""
    suffix = Path(path).suffix.lower()
    if suffix in _KNOWN_TYPES:
        return _KNOWN_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(str(path))
    return guessed or "application/octet-stream"


def validate(file: UploadFile | None, allowed_types: frozenset[str] | set[str]) -> bool:
    """True si le fichier est présent et que son type déclaré est accepté."""
    return file is not None and file.media_type in allowed_types


def check_inputs(excel_file: UploadFile | None, pdf_file: UploadFile | None) -> None:
    """
    Vérifie les deux fichiers avant toute requête.

    Le fichier Excel est contrôlé en premier ; le premier échec interrompt.

    Raises:
        InputValidationError: Si un fichier est absent, introuvable ou d'un mauvais type.
    """
    if not validate(excel_file, EXCEL_MIME_TYPES) or not excel_file.path.is_file():
        raise InputValidationError(EXCEL_ERROR_MESSAGE, "excel")
    if not validate(pdf_file, PDF_MIME_TYPES) or not pdf_file.path.is_file():
        raise InputValidationError(PDF_ERROR_MESSAGE, "pdf")
