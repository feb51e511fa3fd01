"""Workers pour exécution asynchrone."""

from gazettematch_gui.workers.match_worker import MatchWorker
from gazettematch_gui.workers.export_worker import ExportWorker

__all__ = ["MatchWorker", "ExportWorker"]
