"""Interface en ligne de commande GazetteMatch."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict

from gazettematch import __version__
from gazettematch.client import MatchClient, MatchSuccess
from gazettematch.config import THRESHOLD_MAX, THRESHOLD_MIN, GazetteMatchError, MatcherConfig
from gazettematch.export import export_records, load_exported
from gazettematch.session import MatchSession, SessionState
from gazettematch.table import format_table
from gazettematch.validation import InputValidationError, UploadFile


def _load_config(config_path: str | None, endpoint: str | None) -> MatcherConfig:
    config = MatcherConfig.load(config_path) if config_path else MatcherConfig()
    config = config.with_env_overrides()
    if endpoint:
        config = MatcherConfig.from_dict({**asdict(config), "endpoint": endpoint})
    return config


def cmd_match(
    excel_path: str,
    pdf_path: str,
    *,
    threshold: int | None = None,
    config_path: str | None = None,
    endpoint: str | None = None,
    output_path: str | None = None,
    client: MatchClient | None = None,
) -> int:
    """Soumet les deux fichiers, affiche la table et exporte si demandé."""
    config = _load_config(config_path, endpoint)
    session = MatchSession(threshold if threshold is not None else config.threshold)
    session.select_excel(UploadFile.from_path(excel_path))
    session.select_pdf(UploadFile.from_path(pdf_path))

    client = client or MatchClient(timeout=config.timeout)
    try:
        outcome = session.submit(client, config.endpoint)
    except InputValidationError as e:
        print(f"Erreur: {e}")
        return 1

    if not isinstance(outcome, MatchSuccess):
        print(session.message)
        return 0 if session.state is SessionState.EMPTY else 1

    records = session.records
    print(format_table(records))
    n_inexact = sum(1 for r in records if r.is_inexact)
    print(f"\n{len(records)} correspondance(s), dont {n_inexact} inexacte(s) (*) - seuil {session.threshold}")

    if output_path:
        out = export_records(records, output_path, filename=config.export_filename)
        print(f"Fichier de sortie: {out}")
    return 0


def cmd_show(filepath: str) -> int:
    """Relit un classeur exporté et l'affiche."""
    records = load_exported(filepath)
    if not records:
        print("Aucun enregistrement.")
        return 0
    print(format_table(records))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gazettematch",
        description="Recherche des noms d'un tableur Excel dans une gazette PDF (service distant)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Journalisation détaillée")

    subparsers = parser.add_subparsers(dest="command", help="Commandes")

    # match
    p_match = subparsers.add_parser("match", help="Soumettre un tableur et une gazette")
    p_match.add_argument("--excel", "-x", required=True, help="Fichier xlsx des noms")
    p_match.add_argument("--pdf", "-p", required=True, help="Gazette PDF")
    p_match.add_argument(
        "--threshold",
        "-t",
        type=int,
        choices=range(THRESHOLD_MIN, THRESHOLD_MAX + 1),
        metavar=f"{{{THRESHOLD_MIN}..{THRESHOLD_MAX}}}",
        help="Seuil de similarité (défaut: config, sinon 100)",
    )
    p_match.add_argument("--config", "-c", help="Fichier config JSON")
    p_match.add_argument("--endpoint", "-e", help="URL du service de matching")
    p_match.add_argument("--output", "-o", help="Fichier xlsx ou dossier de sortie")

    # show
    p_show = subparsers.add_parser("show", help="Afficher un classeur exporté")
    p_show.add_argument("file", help="Fichier xlsx exporté")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "match":
            return cmd_match(
                args.excel,
                args.pdf,
                threshold=args.threshold,
                config_path=args.config,
                endpoint=args.endpoint,
                output_path=args.output,
            )
        if args.command == "show":
            return cmd_show(args.file)
    except GazetteMatchError as e:
        print(f"Erreur: {e}")
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
