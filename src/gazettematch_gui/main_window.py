"""Fenêtre principale : upload, résultats et orchestration des workers."""

from __future__ import annotations

from PySide6.QtWidgets import QMainWindow, QMessageBox, QVBoxLayout, QWidget

from gazettematch.client import MatchClient, MatchOutcome, MatchSuccess
from gazettematch.config import MatcherConfig
from gazettematch.session import MatchSession, SessionState, SubmissionInProgressError
from gazettematch.validation import InputValidationError
from gazettematch_gui.screens import ResultsScreen, UploadScreen
from gazettematch_gui.workers import ExportWorker, MatchWorker


class MainWindow(QMainWindow):
    """Fenêtre principale : un seul flux de matching par fenêtre."""

    def __init__(self, config: MatcherConfig | None = None) -> None:
        super().__init__()
        self._config = config or MatcherConfig()
        self._session = MatchSession(self._config.threshold)
        self._client = MatchClient(timeout=self._config.timeout)
        self._match_worker: MatchWorker | None = None
        self._export_worker: ExportWorker | None = None
        self._setup_ui()

    def _setup_ui(self) -> None:
        self.setWindowTitle("Gazette Name Matcher")
        self.setMinimumSize(800, 600)
        self.resize(1000, 700)

        central = QWidget()
        layout = QVBoxLayout(central)

        self._upload_screen = UploadScreen(self._session, on_match_requested=self._run_matching)
        self._results_screen = ResultsScreen(
            on_export_requested=self._run_export, export_filename=self._config.export_filename
        )
        self._results_screen.setVisible(False)

        layout.addWidget(self._upload_screen)
        layout.addWidget(self._results_screen, stretch=1)
        self.setCentralWidget(central)

    def _run_matching(self) -> None:
        """Valide les fichiers puis lance la requête dans un worker."""
        try:
            request = self._session.begin_submit(self._config.endpoint)
        except InputValidationError as e:
            QMessageBox.warning(self, "Fichier invalide", str(e))
            return
        except SubmissionInProgressError:
            return
        except OSError as e:
            QMessageBox.critical(self, "Erreur", f"Impossible de lire les fichiers.\n\n{e}")
            return

        self._upload_screen.set_loading(True)
        self._match_worker = MatchWorker(self._client, request, self)
        self._match_worker.finished.connect(self._on_matching_finished)
        self._match_worker.start()

    def _on_matching_finished(self, outcome: MatchOutcome) -> None:
        message = self._session.finish_submit(outcome)
        self._upload_screen.set_loading(self._session.loading)
        self._results_screen.set_records(self._session.records)
        if isinstance(outcome, MatchSuccess):
            return
        if self._session.state is SessionState.EMPTY:
            QMessageBox.information(self, "Résultat", message)
        else:
            QMessageBox.critical(self, "Erreur matching", f"{message}\n\n{outcome.detail}")

    def _run_export(self, xlsx_path: str) -> None:
        """Lance l'export dans un worker."""
        records = self._session.records
        if not records:
            QMessageBox.warning(self, "Attention", "Aucune correspondance à exporter.")
            return
        self._results_screen.set_export_enabled(False)
        self._export_worker = ExportWorker(records, xlsx_path, self)
        self._export_worker.finished.connect(self._on_export_finished)
        self._export_worker.error.connect(self._on_export_error)
        self._export_worker.start()

    def _on_export_finished(self, xlsx_path: str) -> None:
        self._results_screen.set_export_enabled(True)
        self._results_screen.set_status(f"Export réussi: {xlsx_path}")

    def _on_export_error(self, msg: str) -> None:
        self._results_screen.set_export_enabled(True)
        QMessageBox.critical(self, "Erreur export", msg)
