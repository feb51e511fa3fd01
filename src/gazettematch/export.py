"""Export des enregistrements vers un classeur xlsx et relecture."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pandas as pd

from gazettematch.config import DEFAULT_EXPORT_FILENAME, GazetteMatchError
from gazettematch.schema import MatchRecord, RecordFormatError, SCORE_KEY
from gazettematch.table import NUMBER_COLUMN, column_labels, record_columns

EXPORT_FILENAME = DEFAULT_EXPORT_FILENAME
EXPORT_SHEET_NAME = "Matched Names"


class ExportError(GazetteMatchError):
    """Erreur d'écriture ou de relecture du classeur exporté."""


def _cell_value(value: Any) -> Any:
    # openpyxl n'accepte que des scalaires
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False)
    return value


def records_to_dataframe(records: list[MatchRecord]) -> pd.DataFrame:
    """
    Aplatit les enregistrements : colonne `No` (1..N) puis chaque champ dans
    l'ordre de première rencontre. Aucun filtrage, tri ni troncature.

    Les lignes sont construites par position : un champ nommé `No` est
    exporté sous son en-tête affiché (`No_1`) sans écraser la numérotation.
    """
    columns = record_columns(records)
    rows = [
        [i, *(_cell_value(record.get(col)) for col in columns)]
        for i, record in enumerate(records, start=1)
    ]
    return pd.DataFrame(rows, columns=[NUMBER_COLUMN, *column_labels(columns)])


def resolve_export_path(path: str | Path | None, filename: str = EXPORT_FILENAME) -> Path:
    """Dossier → fichier par défaut dans ce dossier ; None → fichier par défaut dans le cwd."""
    if path is None:
        return Path(filename)
    p = Path(path)
    if p.is_dir():
        return p / filename
    if p.suffix.lower() != ".xlsx":
        p = p.with_name(p.name + ".xlsx")
    return p


def export_records(
    records: list[MatchRecord],
    path: str | Path | None = None,
    *,
    filename: str = EXPORT_FILENAME,
) -> Path:
    """
    Écrit une feuille unique : en-tête `No` + champs, une ligne par enregistrement.

    Returns:
        Chemin du fichier écrit.

    Raises:
        ExportError: Si l'écriture échoue.
    """
    out = resolve_export_path(path, filename)
    df = records_to_dataframe(records)
    try:
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name=EXPORT_SHEET_NAME, index=False)
    except (OSError, ValueError) as e:
        raise ExportError(f"Impossible d'écrire {out}: {e}") from e
    return out


def load_exported(path: str | Path) -> list[MatchRecord]:
    """
    Relit un classeur exporté en enregistrements (colonne `No` retirée).

    Seules les cellules vides redeviennent des champs absents : les chaînes
    comme "N/A" ou "null" sont conservées telles quelles. Le score reste numérique.

    Raises:
        ExportError: Si le fichier est absent, illisible ou sans colonne score valide.
    """
    p = Path(path)
    if not p.exists():
        raise ExportError(f"Fichier introuvable: {p}")
    try:
        df = pd.read_excel(p, sheet_name=0, engine="openpyxl", keep_default_na=False, na_values=[])
    except Exception as e:
        raise ExportError(f"Impossible de lire {p}: {e}") from e

    if len(df.columns) and str(df.columns[0]) == NUMBER_COLUMN:
        df = df.iloc[:, 1:]

    records: list[MatchRecord] = []
    for raw in df.to_dict(orient="records"):
        fields = {}
        for key, value in raw.items():
            if isinstance(value, str) and value == "":
                continue
            if pd.isna(value):
                continue
            if hasattr(value, "item"):
                value = value.item()
            fields[str(key)] = value
        if SCORE_KEY in fields and isinstance(fields[SCORE_KEY], float) and fields[SCORE_KEY].is_integer():
            fields[SCORE_KEY] = int(fields[SCORE_KEY])
        try:
            records.append(MatchRecord.from_dict(fields))
        except RecordFormatError as e:
            raise ExportError(f"Ligne invalide dans {p}: {e}") from e
    return records
