"""Point d'entrée de l'application GUI GazetteMatch."""

from __future__ import annotations

import sys

# Import pandas avant PySide6 pour éviter le conflit shiboken/six
# (AttributeError: '_SixMetaPathImporter' object has no attribute '_path')
import pandas  # noqa: F401

from PySide6.QtWidgets import QApplication

from gazettematch.config import MatcherConfig
from gazettematch_gui.main_window import MainWindow


def main() -> int:
    """Lance l'application GUI."""
    app = QApplication(sys.argv)
    app.setApplicationName("GazetteMatch")
    app.setOrganizationName("GazetteMatch")
    win = MainWindow(MatcherConfig().with_env_overrides())
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
