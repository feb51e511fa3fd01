"""Écran Résultats : table numérotée et export xlsx."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWidgets import (
    QFileDialog,
    QHeaderView,
    QLabel,
    QPushButton,
    QTableView,
    QVBoxLayout,
    QWidget,
)

from gazettematch.export import EXPORT_FILENAME
from gazettematch.schema import MatchRecord
from gazettematch_gui.models import RecordsModel


class ResultsScreen(QWidget):
    """Affiché uniquement lorsqu'il y a des correspondances."""

    def __init__(
        self,
        on_export_requested: Callable[[str], None] | None = None,
        export_filename: str = EXPORT_FILENAME,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._export_filename = export_filename
        self._on_export_requested = on_export_requested or (lambda path: None)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)

        self._title = QLabel("Matched Names:")
        layout.addWidget(self._title)

        self._model = RecordsModel()
        self._table = QTableView()
        self._table.setModel(self._model)
        self._table.verticalHeader().setVisible(False)
        self._table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        self._table.horizontalHeader().setStretchLastSection(True)
        layout.addWidget(self._table)

        self._export_btn = QPushButton("Download as Excel")
        self._export_btn.clicked.connect(self._on_export_clicked)
        layout.addWidget(self._export_btn)

        self._status_label = QLabel("")
        layout.addWidget(self._status_label)

    def set_records(self, records: list[MatchRecord]) -> None:
        """Met à jour la table ; l'écran est masqué si la liste est vide."""
        self._model.set_records(records)
        n_inexact = sum(1 for r in records if r.is_inexact)
        self._title.setText(f"Matched Names: {len(records)} ({n_inexact} inexact)")
        self._status_label.setText("")
        self.setVisible(bool(records))

    def _on_export_clicked(self) -> None:
        path, _ = QFileDialog.getSaveFileName(self, "Exporter les correspondances", self._export_filename, "Excel (*.xlsx)")
        if not path:
            return
        if not path.endswith(".xlsx"):
            path += ".xlsx"
        self._on_export_requested(path)

    def set_export_enabled(self, enabled: bool) -> None:
        self._export_btn.setEnabled(enabled)

    def set_status(self, text: str) -> None:
        """Affiche un message de statut."""
        self._status_label.setText(text)
