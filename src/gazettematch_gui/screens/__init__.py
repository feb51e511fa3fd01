"""Écrans de l'application GazetteMatch GUI."""

from gazettematch_gui.screens.upload_screen import UploadScreen
from gazettematch_gui.screens.results_screen import ResultsScreen

__all__ = ["UploadScreen", "ResultsScreen"]
