"""Interface graphique GazetteMatch (PySide6)."""
