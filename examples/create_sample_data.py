"""Crée un tableur de noms et un config JSON de démonstration pour GazetteMatch."""

import json
from pathlib import Path

import pandas as pd

DATA_DIR = Path(__file__).parent / "data"
DATA_DIR.mkdir(exist_ok=True)

names = pd.DataFrame({
    "Name": ["Kwame Mensah", "Ama Owusu", "Kofi Boateng", "Efua Sutherland"],
    "Region": ["Ashanti", "Central", "Volta", "Greater Accra"],
})

names.to_excel(DATA_DIR / "names.xlsx", index=False, engine="openpyxl")
(DATA_DIR / "config.json").write_text(
    json.dumps({"endpoint": "http://localhost:5000/match", "threshold": 90, "timeout": 60}, indent=2),
    encoding="utf-8",
)
print(f"Fichiers créés dans {DATA_DIR}")
