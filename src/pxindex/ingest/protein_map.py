"""Loader for protein identifier enrichment tables."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

logger = logging.getLogger(__name__)

COLUMN_ALIASES: Dict[str, List[str]] = {
    "identifier": ["accession", "protein", "identifier", "dbkey", "protein_accession"],
    "database": ["database", "dbname", "source", "db"],
}


def _match_column(columns: List[str], candidates: List[str]) -> Optional[str]:
    lower = {str(c).strip().lower(): c for c in columns}
    for alias in candidates:
        if alias in lower:
            return lower[alias]
    return None


def _cell(value: object) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def load_protein_map(path: Path) -> Dict[str, str]:
    """Load an identifier -> database table (CSV or TSV), keeping file order."""
    df = pd.read_csv(path, sep=None, engine="python", dtype=str)
    columns = df.columns.tolist()
    identifier_column = _match_column(columns, COLUMN_ALIASES["identifier"])
    database_column = _match_column(columns, COLUMN_ALIASES["database"])
    if identifier_column is None or database_column is None:
        raise ValueError(f"{path}: expected identifier and database columns, found {columns}")

    proteins: Dict[str, str] = {}
    for idx, row in df.iterrows():
        identifier = _cell(row.get(identifier_column))
        database = _cell(row.get(database_column))
        if not identifier or not database:
            logger.warning("Row %s of %s missing identifier or database; skipped", idx, path)
            continue
        proteins[identifier] = database

    logger.info("Loaded %d protein cross-references from %s", len(proteins), path)
    return proteins
