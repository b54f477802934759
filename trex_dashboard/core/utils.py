from __future__ import annotations
import re
from typing import Any, Iterable

import pandas as pd

from trex_dashboard import config

_MULTI_SEP = re.compile(r"[,;/]+")

def _is_missing(raw: Any) -> bool:
    return raw is None or (isinstance(raw, float) and pd.isna(raw))

def split_multi(raw: Any) -> list[str]:
    """Split a multi-valued cell on runs of ',', ';' or '/' into trimmed, non-empty parts.

    Order follows the source and duplicates are kept, callers count them.
    """
    if _is_missing(raw):
        return []
    s = str(raw)
    if not s:
        return []
    parts = _MULTI_SEP.split(s)
    return [p.strip() for p in parts if p.strip()]

def norm_str(x: Any) -> str:
    return str(x).strip().lower() if not _is_missing(x) else ""

def disease_match(row_disease: Any, selected: Any) -> bool:
    """Case and surrounding-whitespace insensitive disease equality."""
    if _is_missing(row_disease) or _is_missing(selected):
        return False
    if not str(row_disease) or not str(selected):
        return False
    return norm_str(row_disease) == norm_str(selected)

def unique_preserve(seq: Iterable[str]) -> list[str]:
    seen, out = set(), []
    for x in seq:
        if x not in seen:
            seen.add(x); out.append(x)
    return out

def suggest_diseases(query: str, diseases: Iterable[str], limit: int = config.MAX_SUGGESTIONS) -> list[str]:
    """Autocomplete: diseases containing the query (case-insensitive), alphabetised."""
    q = (query or "").lower()
    if not q:
        return []
    matches = sorted(d for d in diseases if q in d.lower())
    return matches[:limit]

def trial_url(nct_id: str) -> str:
    return config.CLINICALTRIALS_STUDY_URL.format(id=nct_id)

def pubmed_url(pmid: str) -> str:
    return config.PUBMED_ARTICLE_URL.format(id=pmid)

def trial_links(nct_ids: Iterable[str]) -> str:
    """Markdown links to ClinicalTrials.gov, or a dash placeholder when empty."""
    ids = [i for i in nct_ids if i]
    if not ids:
        return "—"
    return ", ".join(f"[{tid}]({trial_url(tid)})" for tid in ids)
