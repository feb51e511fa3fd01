"""Configuration et chargement du fichier config JSON."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

DEFAULT_ENDPOINT = "https://scannerb.onrender.com/match"
DEFAULT_TIMEOUT = 120.0
DEFAULT_EXPORT_FILENAME = "Matched_Deceased_Names.xlsx"

THRESHOLD_MIN = 80
THRESHOLD_MAX = 100
DEFAULT_THRESHOLD = 100

ENV_ENDPOINT = "GAZETTEMATCH_ENDPOINT"


class GazetteMatchError(Exception):
    """Exception de base pour GazetteMatch."""


class ConfigError(GazetteMatchError, ValueError):
    """Erreur de validation de la configuration."""


class ConfigFileError(GazetteMatchError):
    """Erreur de chargement du fichier de configuration (fichier absent, JSON invalide)."""


class ThresholdError(ConfigError):
    """Seuil de matching hors de la plage [80, 100] ou non entier."""


def check_threshold(value: Any) -> int:
    """
    Valide un seuil de matching et le retourne tel quel.

    Aucun arrondi ni bornage : une valeur invalide est rejetée.

    Raises:
        ThresholdError: Si la valeur n'est pas un entier de [80, 100].
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ThresholdError(f"threshold doit être un entier (got {value!r})")
    if not THRESHOLD_MIN <= value <= THRESHOLD_MAX:
        raise ThresholdError(
            f"threshold doit être entre {THRESHOLD_MIN} et {THRESHOLD_MAX} (got {value})"
        )
    return value


@dataclass(frozen=True)
class MatcherConfig:
    """Configuration du client de matching."""

    endpoint: str = DEFAULT_ENDPOINT
    threshold: int = DEFAULT_THRESHOLD
    timeout: float = DEFAULT_TIMEOUT
    export_filename: str = DEFAULT_EXPORT_FILENAME

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> MatcherConfig:
        endpoint = d.get("endpoint", DEFAULT_ENDPOINT)
        threshold = d.get("threshold", DEFAULT_THRESHOLD)
        export_filename = d.get("export_filename", DEFAULT_EXPORT_FILENAME)
        try:
            timeout = float(d.get("timeout", DEFAULT_TIMEOUT))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"timeout invalide: {d.get('timeout')!r}") from e

        _check_endpoint(endpoint)
        check_threshold(threshold)
        if timeout <= 0:
            raise ConfigError(f"timeout doit être > 0 (got {timeout})")
        if not isinstance(export_filename, str) or not export_filename.lower().endswith(".xlsx"):
            raise ConfigError(f"export_filename doit se terminer par .xlsx (got {export_filename!r})")

        return cls(
            endpoint=endpoint,
            threshold=threshold,
            timeout=timeout,
            export_filename=export_filename,
        )

    @classmethod
    def load(cls, path: str | Path) -> MatcherConfig:
        """
        Charge la configuration depuis un fichier JSON.

        Raises:
            ConfigFileError: Si le fichier est absent ou le JSON invalide.
            ConfigError: Si la configuration est invalide.
        """
        path = Path(path).resolve()
        if not path.exists():
            raise ConfigFileError(f"Fichier de configuration introuvable: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                d = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigFileError(f"JSON invalide dans {path}: {e}") from e
        except OSError as e:
            raise ConfigFileError(f"Impossible de lire {path}: {e}") from e

        if not isinstance(d, dict):
            raise ConfigFileError(f"Fichier de configuration invalide: {path} doit contenir un objet JSON")

        return cls.from_dict(d)

    def with_env_overrides(self, environ: dict[str, str] | None = None) -> MatcherConfig:
        """Retourne une copie où GAZETTEMATCH_ENDPOINT remplace l'endpoint s'il est défini."""
        env = os.environ if environ is None else environ
        endpoint = env.get(ENV_ENDPOINT, "").strip()
        if not endpoint:
            return self
        _check_endpoint(endpoint)
        return replace(self, endpoint=endpoint)


def _check_endpoint(endpoint: Any) -> None:
    if not isinstance(endpoint, str):
        raise ConfigError(f"endpoint invalide: {endpoint!r}")
    parsed = urlparse(endpoint)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"endpoint doit être une URL http(s) (got {endpoint!r})")
