"""Session de travail : fichiers sélectionnés, seuil, résultats et machine à états."""

from __future__ import annotations

import logging
from enum import Enum

from gazettematch.client import EmptyResult, MatchClient, MatchOutcome, MatchSuccess, TransportFailure
from gazettematch.config import DEFAULT_THRESHOLD, GazetteMatchError
from gazettematch.request import MatchRequest, build_match_request
from gazettematch.schema import MatchRecord
from gazettematch.store import MatchResultStore
from gazettematch.validation import InputValidationError, UploadFile, check_inputs

logger = logging.getLogger(__name__)

NO_MATCHES_MESSAGE = "No matches found."
FAILURE_MESSAGE = "An error occurred while processing your files."


class SubmissionInProgressError(GazetteMatchError):
    """Une requête de matching est déjà en cours pour cette session."""


class SessionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    EMPTY = "empty"
    FAILED = "failed"


class MatchSession:
    """
    État unique d'un flux upload → matching → revue → export.

    Transitions : IDLE → SUBMITTING → {SUCCEEDED | EMPTY | FAILED}. Les états
    terminaux acceptent une nouvelle soumission ; SUBMITTING la refuse.
    """

    def __init__(self, threshold: int = DEFAULT_THRESHOLD) -> None:
        self.excel_file: UploadFile | None = None
        self.pdf_file: UploadFile | None = None
        self.store = MatchResultStore(threshold)
        self.state = SessionState.IDLE
        self.message = ""

    @property
    def loading(self) -> bool:
        return self.state is SessionState.SUBMITTING

    @property
    def threshold(self) -> int:
        return self.store.threshold

    @property
    def records(self) -> list[MatchRecord]:
        return self.store.current_records()

    def select_excel(self, file: UploadFile | None) -> None:
        self.excel_file = file

    def select_pdf(self, file: UploadFile | None) -> None:
        self.pdf_file = file

    def set_threshold(self, value: int) -> None:
        self.store.set_threshold(value)

    def begin_submit(self, endpoint: str) -> MatchRequest:
        """
        Valide les entrées, construit la requête et passe en SUBMITTING.

        Raises:
            SubmissionInProgressError: Si une requête est déjà en cours.
            InputValidationError: Si un fichier est invalide (aucune requête construite).
        """
        if self.loading:
            raise SubmissionInProgressError("Une requête de matching est déjà en cours")
        try:
            check_inputs(self.excel_file, self.pdf_file)
        except InputValidationError as e:
            self.message = str(e)
            raise
        request = build_match_request(self.excel_file, self.pdf_file, self.threshold, endpoint)
        self.state = SessionState.SUBMITTING
        self.message = ""
        return request

    def finish_submit(self, outcome: MatchOutcome) -> str:
        """Applique l'issue au store, quitte SUBMITTING et retourne le message utilisateur."""
        if isinstance(outcome, MatchSuccess):
            self.store.replace(outcome.records)
            self.state = SessionState.SUCCEEDED
            self.message = ""
        elif isinstance(outcome, EmptyResult):
            self.store.clear()
            self.state = SessionState.EMPTY
            self.message = NO_MATCHES_MESSAGE
        else:
            self.store.clear()
            self.state = SessionState.FAILED
            self.message = FAILURE_MESSAGE
        return self.message

    def submit(self, client: MatchClient, endpoint: str) -> MatchOutcome:
        """Soumission synchrone : begin_submit, appel réseau, finish_submit."""
        request = self.begin_submit(endpoint)
        try:
            outcome = client.submit(request)
        except Exception as e:
            logger.exception("Erreur inattendue pendant la requête de matching")
            outcome = TransportFailure(detail=str(e))
        self.finish_submit(outcome)
        return outcome
