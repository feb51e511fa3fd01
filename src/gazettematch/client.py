"""Client HTTP du service de matching et classification des réponses."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Union

import requests

from gazettematch.config import DEFAULT_TIMEOUT
from gazettematch.request import MatchRequest
from gazettematch.schema import MatchRecord, RecordFormatError, parse_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchSuccess:
    """Réponse valide contenant au moins un enregistrement."""

    records: list[MatchRecord] = field(default_factory=list)


@dataclass(frozen=True)
class EmptyResult:
    """Réponse valide sans correspondance (`matched` absent, vide ou pas une liste)."""


@dataclass(frozen=True)
class TransportFailure:
    """Échec de l'appel : réseau, statut HTTP non 2xx ou corps illisible."""

    detail: str


MatchOutcome = Union[MatchSuccess, EmptyResult, TransportFailure]


class MatchClient:
    """Envoie une MatchRequest au service ; un seul appel, jamais de nouvel essai."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout

    def submit(self, request: MatchRequest) -> MatchOutcome:
        """Exécute la requête et retourne l'issue, sans lever pour les erreurs de transport."""
        logger.debug("POST %s (%d parties)", request.url_with_query(), len(request.parts))
        try:
            response = self._session.post(
                request.url,
                params=request.params,
                files=request.parts,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            return self._failure(f"Erreur réseau: {e}")

        if not 200 <= response.status_code < 300:
            return self._failure(f"Statut HTTP {response.status_code} pour {request.url}")

        try:
            data = response.json()
        except ValueError as e:
            return self._failure(f"Réponse non JSON: {e}")

        return self._classify(data)

    def close(self) -> None:
        self._session.close()

    def _classify(self, data: Any) -> MatchOutcome:
        if not isinstance(data, dict):
            return self._failure(f"Réponse inattendue: objet attendu (got {type(data).__name__})")
        matched = data.get("matched")
        if not isinstance(matched, list) or not matched:
            logger.info("Aucune correspondance renvoyée")
            return EmptyResult()
        try:
            records = parse_records(matched)
        except RecordFormatError as e:
            return self._failure(f"Enregistrement invalide: {e}")
        logger.debug("%d correspondances reçues", len(records))
        return MatchSuccess(records=records)

    @staticmethod
    def _failure(detail: str) -> TransportFailure:
        logger.warning("Échec de la requête de matching: %s", detail)
        return TransportFailure(detail=detail)
