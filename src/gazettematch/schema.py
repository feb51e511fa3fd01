"""Schéma des enregistrements renvoyés par le service de matching."""

from __future__ import annotations

import math
from typing import Any, Iterator, Mapping

from gazettematch.config import GazetteMatchError

# Deux déploiements du service : nom générique ou nom du défunt
SOURCE_NAME_KEYS = ("excelName", "nameOfTheDeceased")
GAZETTE_MATCH_KEY = "gazetteMatch"
SCORE_KEY = "score"
EXACT_SCORE = 100


class RecordFormatError(GazetteMatchError, ValueError):
    """Enregistrement de réponse mal formé (score absent ou non numérique)."""


class MatchRecord:
    """
    Une paire de noms appariée par le service.

    Modélisé comme une table ordonnée ouverte : tous les champs renvoyés sont
    conservés dans l'ordre reçu, seuls `score` et les alias de nom sont lus.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any]) -> None:
        self._fields = dict(fields)

    @classmethod
    def from_dict(cls, d: Any) -> MatchRecord:
        """
        Valide et construit un enregistrement.

        Raises:
            RecordFormatError: Si `d` n'est pas un objet ou si `score` est absent ou non numérique.
        """
        if not isinstance(d, Mapping):
            raise RecordFormatError(f"enregistrement invalide: objet attendu (got {type(d).__name__})")
        if SCORE_KEY not in d:
            raise RecordFormatError(f"champ {SCORE_KEY!r} absent: {dict(d)!r}")
        score = d[SCORE_KEY]
        if isinstance(score, bool) or not isinstance(score, (int, float)) or math.isnan(score):
            raise RecordFormatError(f"score non numérique: {score!r}")
        return cls(d)

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self._fields)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._fields)

    def keys(self) -> list[str]:
        return list(self._fields)

    def get(self, key: str, default: Any = None) -> Any:
        return self._fields.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def source_name(self) -> str:
        for key in SOURCE_NAME_KEYS:
            if key in self._fields:
                return self._fields[key]
        return ""

    @property
    def gazette_match(self) -> str:
        return self._fields.get(GAZETTE_MATCH_KEY, "")

    @property
    def score(self) -> float:
        return self._fields[SCORE_KEY]

    @property
    def is_inexact(self) -> bool:
        return self.score < EXACT_SCORE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatchRecord):
            return NotImplemented
        return list(self._fields.items()) == list(other._fields.items())

    def __hash__(self) -> int:
        return hash(tuple(self._fields))

    def __repr__(self) -> str:
        return f"MatchRecord(source={self.source_name!r}, match={self.gazette_match!r}, score={self.score})"


def parse_records(items: list[Any]) -> list[MatchRecord]:
    """Construit la liste d'enregistrements dans l'ordre reçu."""
    return [MatchRecord.from_dict(item) for item in items]
