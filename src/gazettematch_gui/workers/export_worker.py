"""Worker pour exécuter l'export dans un thread."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QObject, QThread, Signal

from gazettematch.export import export_records
from gazettematch.schema import MatchRecord


class ExportWorker(QThread):
    """Thread exécutant export_records."""

    finished = Signal(str)  # out_xlsx
    error = Signal(str)

    def __init__(
        self,
        records: list[MatchRecord],
        out_xlsx: str | Path,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._records = records
        self._out_xlsx = Path(out_xlsx)

    def run(self) -> None:
        try:
            out = export_records(self._records, self._out_xlsx)
            self.finished.emit(str(out))
        except Exception as e:
            self.error.emit(str(e))
