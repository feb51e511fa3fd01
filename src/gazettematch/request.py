"""Construction de la requête multipart envoyée au service de matching."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlencode

from gazettematch.config import check_threshold
from gazettematch.validation import UploadFile

# (nom de fichier, contenu, type MIME) : format attendu par requests pour files=
FilePart = tuple[str, bytes, str]


@dataclass(frozen=True)
class MatchRequest:
    """Requête prête à envoyer : URL, paramètres de query et parties multipart."""

    url: str
    params: dict[str, str]
    parts: dict[str, FilePart]

    @property
    def threshold(self) -> str:
        return self.params["threshold"]

    def url_with_query(self) -> str:
        sep = "&" if "?" in self.url else "?"
        return f"{self.url}{sep}{urlencode(self.params)}"


def build_match_request(
    excel_file: UploadFile,
    pdf_file: UploadFile,
    threshold: int,
    endpoint: str,
) -> MatchRequest:
    """
    Assemble la requête : parties `excel` et `pdf` (octets bruts) et seuil en query.

    Le seuil est sérialisé en chaîne d'entier, sans arrondi.

    Raises:
        ThresholdError: Si le seuil n'est pas un entier de [80, 100].
        OSError: Si un fichier ne peut pas être lu.
    """
    check_threshold(threshold)
    parts: dict[str, FilePart] = {
        "excel": (excel_file.name, excel_file.read_bytes(), excel_file.media_type),
        "pdf": (pdf_file.name, pdf_file.read_bytes(), pdf_file.media_type),
    }
    return MatchRequest(url=endpoint, params={"threshold": str(threshold)}, parts=parts)
