"""Projection des enregistrements en table numérotée (affichage)."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from gazettematch.schema import MatchRecord

NUMBER_COLUMN = "No"


@dataclass
class TableRow:
    """Une ligne affichée : numéro (1..N), valeurs par colonne, signalement si inexact."""

    number: int
    values: list[Any]
    flagged: bool


def record_columns(records: list[MatchRecord]) -> list[str]:
    """Noms de champs dans l'ordre de première rencontre, tous enregistrements confondus."""
    seen: dict[str, None] = {}
    for record in records:
        for key in record:
            seen.setdefault(key, None)
    return list(seen)


def column_labels(columns: list[str]) -> list[str]:
    """
    En-têtes affichés pour les champs. Un champ nommé `No` reçoit le premier
    suffixe libre (`No_1`, `No_2`...) pour ne pas masquer la colonne de numéro.
    """
    taken = {NUMBER_COLUMN, *columns}
    labels: list[str] = []
    for col in columns:
        if col != NUMBER_COLUMN:
            labels.append(col)
            continue
        k = 1
        while f"{col}_{k}" in taken:
            k += 1
        label = f"{col}_{k}"
        taken.add(label)
        labels.append(label)
    return labels


def display_columns(records: list[MatchRecord]) -> list[str]:
    return [NUMBER_COLUMN, *column_labels(record_columns(records))]


def display_rows(records: list[MatchRecord]) -> list[TableRow]:
    columns = record_columns(records)
    return [
        TableRow(
            number=i,
            values=[i, *(record.get(col, "") for col in columns)],
            flagged=record.is_inexact,
        )
        for i, record in enumerate(records, start=1)
    ]


def format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_table(records: list[MatchRecord]) -> str:
    """Table texte pour la console ; les lignes inexactes (score < 100) sont marquées d'un *."""
    columns = display_columns(records)
    cells = [[format_value(v) for v in row.values] for row in display_rows(records)]
    widths = [len(c) for c in columns]
    for row in cells:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def _line(values: list[str], mark: str) -> str:
        return mark + " " + " | ".join(v.ljust(widths[i]) for i, v in enumerate(values))

    lines = [_line(columns, " "), "  " + "-+-".join("-" * w for w in widths)]
    for row, values in zip(display_rows(records), cells):
        lines.append(_line(values, "*" if row.flagged else " "))
    return "\n".join(line.rstrip() for line in lines)
