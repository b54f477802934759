"""Per-disease distributions, top drug rankings and the phase 3/4 drug list."""

from __future__ import annotations
from collections import Counter
from typing import Callable, Mapping, Optional

import pandas as pd

from .categories import DRUG_NAME
from .store import DISEASE, NCT_ID, PHASES
from .utils import disease_match, split_multi

LATE_PHASE_MARKERS = ("PHASE3", "PHASE4")

def filter_disease(df: pd.DataFrame, disease: str, disease_field: str = DISEASE) -> pd.DataFrame:
    """Rows of `df` whose disease matches `disease`."""
    if df is None or df.empty or disease_field not in df.columns:
        return pd.DataFrame(columns=getattr(df, "columns", None))
    mask = df[disease_field].map(lambda d: disease_match(d, disease)).astype(bool)
    return df[mask]

def distribution_by(df: pd.DataFrame,
                    disease: str,
                    value_field: str,
                    multi_valued: bool = False,
                    disease_field: str = DISEASE,
                    value_of: Optional[Callable[[str], str]] = None) -> dict[str, int]:
    """
    Count labels of `value_field` over the rows matching `disease`.

    Multi-valued cells contribute one count per token from `split_multi`, so the
    counts sum to the number of tokens rather than the number of rows. Single
    values can be mapped through `value_of` first (e.g. drug -> ATC category).
    """
    rows = filter_disease(df, disease, disease_field)
    counts: Counter[str] = Counter()
    if rows.empty or value_field not in rows.columns:
        return dict(counts)
    for raw in rows[value_field]:
        if multi_valued:
            counts.update(split_multi(raw))
        else:
            counts[value_of(raw) if value_of else raw] += 1
    return dict(counts)

def top_n_drugs(link_df: pd.DataFrame, disease: str, n: int = 10) -> list[tuple[str, int]]:
    """Most frequent drugs for a disease, count descending then name ascending."""
    counts = distribution_by(link_df, disease, DRUG_NAME)
    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return ranked[:max(n, 0)]

def is_late_phase(phases: str) -> bool:
    # substring test, so "PHASE3B" and "PHASE2/PHASE3" both count
    return bool(phases) and any(marker in phases for marker in LATE_PHASE_MARKERS)

def phase34_drugs(trials: pd.DataFrame,
                  drugs_by_trial: Mapping[str, tuple[str, ...]],
                  disease: str) -> list[str]:
    """Sorted, de-duplicated drugs linked to the disease's phase 3 or 4 trials."""
    rows = filter_disease(trials, disease)
    found: set[str] = set()
    if rows.empty:
        return []
    for phases, nct in zip(rows[PHASES], rows[NCT_ID]):
        if is_late_phase(phases):
            found.update(drugs_by_trial.get(nct, ()))
    return sorted(found)
