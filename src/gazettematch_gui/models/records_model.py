"""QAbstractTableModel pour afficher les correspondances numérotées."""

from __future__ import annotations

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt
from PySide6.QtGui import QBrush, QColor, QFont

from gazettematch.schema import MatchRecord
from gazettematch.table import TableRow, display_columns, display_rows, format_value

INEXACT_BACKGROUND = QColor("#fef9c3")
INEXACT_FOREGROUND = QColor("#854d0e")


class RecordsModel(QAbstractTableModel):
    """Modèle Qt en lecture seule ; les lignes de score < 100 sont surlignées."""

    def __init__(self, records: list[MatchRecord] | None = None, parent: QAbstractTableModel | None = None) -> None:
        super().__init__(parent)
        self._columns: list[str] = []
        self._rows: list[TableRow] = []
        self._build(records or [])

    def _build(self, records: list[MatchRecord]) -> None:
        self._columns = display_columns(records) if records else []
        self._rows = display_rows(records)

    def set_records(self, records: list[MatchRecord]) -> None:
        """Remplace les enregistrements et notifie la vue."""
        self.beginResetModel()
        self._build(records)
        self.endResetModel()

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._rows)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._columns)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> object:
        if not index.isValid():
            return None
        row, col = index.row(), index.column()
        if row < 0 or row >= len(self._rows) or col < 0 or col >= len(self._columns):
            return None
        table_row = self._rows[row]
        if role == Qt.ItemDataRole.DisplayRole:
            return format_value(table_row.values[col])
        if table_row.flagged:
            if role == Qt.ItemDataRole.BackgroundRole:
                return QBrush(INEXACT_BACKGROUND)
            if role == Qt.ItemDataRole.ForegroundRole:
                return QBrush(INEXACT_FOREGROUND)
            if role == Qt.ItemDataRole.FontRole:
                font = QFont()
                font.setBold(True)
                return font
            if role == Qt.ItemDataRole.ToolTipRole:
                return "Correspondance inexacte (score < 100)"
        return None

    def headerData(
        self, section: int, orientation: Qt.Orientation, role: int = Qt.ItemDataRole.DisplayRole
    ) -> str | None:
        if role != Qt.ItemDataRole.DisplayRole:
            return None
        if orientation == Qt.Orientation.Horizontal:
            if section < len(self._columns):
                return self._columns[section]
        return None
