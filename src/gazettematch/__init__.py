"""GazetteMatch - Recherche de noms d'un tableur dans une gazette PDF via un service distant."""

from gazettematch.config import ConfigError, ConfigFileError, GazetteMatchError, ThresholdError
from gazettematch.export import ExportError
from gazettematch.session import SubmissionInProgressError
from gazettematch.validation import InputValidationError

__all__ = [
    "__version__",
    "GazetteMatchError",
    "ConfigError",
    "ConfigFileError",
    "ThresholdError",
    "InputValidationError",
    "SubmissionInProgressError",
    "ExportError",
]

__version__ = "0.1.0"
