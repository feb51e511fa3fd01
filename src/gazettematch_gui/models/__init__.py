"""Modèles Qt pour GazetteMatch GUI."""

from gazettematch_gui.models.records_model import RecordsModel

__all__ = ["RecordsModel"]
