"""Stockage en mémoire des enregistrements courants et du seuil."""

from __future__ import annotations

from typing import Iterable

from gazettematch.config import DEFAULT_THRESHOLD, check_threshold
from gazettematch.schema import MatchRecord


class MatchResultStore:
    """
    Source de vérité pour l'affichage et l'export.

    La liste est un tuple remplacé en une seule affectation : un lecteur voit
    soit l'ancienne liste complète, soit la nouvelle. Ni tri ni dédoublonnage.
    """

    def __init__(self, threshold: int = DEFAULT_THRESHOLD) -> None:
        self._records: tuple[MatchRecord, ...] = ()
        self._threshold = check_threshold(threshold)

    def replace(self, records: Iterable[MatchRecord]) -> None:
        self._records = tuple(records)

    def clear(self) -> None:
        self._records = ()

    def set_threshold(self, value: int) -> None:
        self._threshold = check_threshold(value)

    @property
    def threshold(self) -> int:
        return self._threshold

    def current_records(self) -> list[MatchRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)
