"""
Header-to-column resolution for production sheets.

The sheet maintainers label columns in English or Indonesian and sometimes
not at all, so each logical field is matched against a synonym list and
anything left unmatched falls back to the fixed positional layout.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from ..config import HEADER_SYNONYMS, POSITIONAL_COLUMNS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnMapping:
    """Source column index per logical field; None means not found."""

    date: int | None
    product_line: int | None
    produced: int | None
    qc_pass: int | None
    defect: int | None
    repair: int | None

    @classmethod
    def positional(cls) -> "ColumnMapping":
        return cls(**POSITIONAL_COLUMNS)

    def as_dict(self) -> dict[str, int | None]:
        return {name: getattr(self, name) for name in POSITIONAL_COLUMNS}


def find_index(header: Sequence[str], candidates: Sequence[str]) -> int | None:
    """Return the index of the first candidate present in header, else None.

    Candidates are tried in order; the comparison is case-insensitive and
    exact. When a candidate appears more than once the leftmost cell wins.
    """
    lowered = [(h or "").lower() for h in header]
    for candidate in candidates:
        try:
            return lowered.index(candidate.lower())
        except ValueError:
            continue
    return None


def resolve_columns(header: Sequence[str]) -> ColumnMapping:
    """Resolve which column supplies each record field.

    Rules
    -----
    - date, product_line and produced all unmatched: the header is not a
      header we understand, use the full positional layout.
    - Otherwise keep what matched. date and product_line both unmatched
      take positions 0 and 1; produced unmatched takes position 2.
    - qc_pass, defect and repair each fall back to positions 3, 4 and 5
      on their own whenever unmatched.
    """
    found = {
        name: find_index(header, synonyms)
        for name, synonyms in HEADER_SYNONYMS.items()
    }

    if found["date"] is None and found["product_line"] is None and found["produced"] is None:
        logger.info("No recognisable header names, using positional columns")
        return ColumnMapping.positional()

    if found["date"] is None and found["product_line"] is None:
        found["date"] = POSITIONAL_COLUMNS["date"]
        found["product_line"] = POSITIONAL_COLUMNS["product_line"]

    for name in ("produced", "qc_pass", "defect", "repair"):
        if found[name] is None:
            found[name] = POSITIONAL_COLUMNS[name]

    mapping = ColumnMapping(**found)
    logger.debug("Resolved columns: %s", mapping.as_dict())
    return mapping
