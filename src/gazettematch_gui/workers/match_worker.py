"""Worker pour exécuter la requête de matching dans un thread."""

from __future__ import annotations

from PySide6.QtCore import QObject, QThread, Signal

from gazettematch.client import MatchClient, TransportFailure
from gazettematch.request import MatchRequest


class MatchWorker(QThread):
    """Thread exécutant MatchClient.submit() ; pas d'annulation possible."""

    finished = Signal(object)  # MatchOutcome

    def __init__(self, client: MatchClient, request: MatchRequest, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._client = client
        self._request = request

    def run(self) -> None:
        try:
            outcome = self._client.submit(self._request)
        except Exception as e:
            outcome = TransportFailure(detail=str(e))
        self.finished.emit(outcome)
