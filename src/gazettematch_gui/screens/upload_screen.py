"""Écran Upload : sélection des fichiers, seuil, lancement du matching."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from gazettematch.config import THRESHOLD_MAX, THRESHOLD_MIN
from gazettematch.session import MatchSession
from gazettematch.validation import UploadFile


class UploadScreen(QWidget):
    """Sélecteurs xlsx/pdf, curseur de seuil et bouton de soumission."""

    def __init__(
        self,
        session: MatchSession,
        on_match_requested: Callable[[], None] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._session = session
        self._on_match_requested = on_match_requested or (lambda: None)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)

        file_group = QGroupBox("Fichiers")
        file_layout = QFormLayout()

        self._excel_edit = QLineEdit()
        self._excel_edit.setReadOnly(True)
        self._excel_edit.setPlaceholderText("Tableur des noms (.xlsx)...")
        excel_browse = QPushButton("Parcourir")
        excel_browse.clicked.connect(lambda: self._browse_file("excel"))
        excel_row = QHBoxLayout()
        excel_row.addWidget(self._excel_edit)
        excel_row.addWidget(excel_browse)
        file_layout.addRow("Excel:", excel_row)

        self._pdf_edit = QLineEdit()
        self._pdf_edit.setReadOnly(True)
        self._pdf_edit.setPlaceholderText("Gazette (.pdf)...")
        pdf_browse = QPushButton("Parcourir")
        pdf_browse.clicked.connect(lambda: self._browse_file("pdf"))
        pdf_row = QHBoxLayout()
        pdf_row.addWidget(self._pdf_edit)
        pdf_row.addWidget(pdf_browse)
        file_layout.addRow("Gazette:", pdf_row)

        file_group.setLayout(file_layout)
        layout.addWidget(file_group)

        self._threshold_label = QLabel()
        self._threshold_slider = QSlider(Qt.Orientation.Horizontal)
        self._threshold_slider.setRange(THRESHOLD_MIN, THRESHOLD_MAX)
        self._threshold_slider.setSingleStep(1)
        self._threshold_slider.setValue(self._session.threshold)
        self._threshold_slider.valueChanged.connect(self._on_threshold_changed)
        self._update_threshold_label(self._session.threshold)
        layout.addWidget(self._threshold_label)
        layout.addWidget(self._threshold_slider)

        self._match_btn = QPushButton("Match Names")
        self._match_btn.clicked.connect(self._on_match_requested)
        layout.addWidget(self._match_btn)

    def _browse_file(self, kind: str) -> None:
        if kind == "excel":
            path, _ = QFileDialog.getOpenFileName(self, "Tableur des noms", "", "Excel (*.xlsx)")
            if path:
                self._session.select_excel(UploadFile.from_path(path))
                self._excel_edit.setText(path)
        else:
            path, _ = QFileDialog.getOpenFileName(self, "Gazette", "", "PDF (*.pdf)")
            if path:
                self._session.select_pdf(UploadFile.from_path(path))
                self._pdf_edit.setText(path)

    def _on_threshold_changed(self, value: int) -> None:
        self._session.set_threshold(value)
        self._update_threshold_label(value)

    def _update_threshold_label(self, value: int) -> None:
        self._threshold_label.setText(f"Match Threshold: {value}")

    def set_loading(self, loading: bool) -> None:
        """Désactive la soumission pendant une requête en cours."""
        self._match_btn.setEnabled(not loading)
        self._match_btn.setText("Processing..." if loading else "Match Names")
