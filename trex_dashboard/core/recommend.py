"""
Cross-disease drug recommendations.

A disease is "similar" to the selected one when they share at least one trial
drug. Drugs tested against similar diseases but never against the selected
disease are ranked by the number of distinct trials they appear in.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum

import pandas as pd

from .categories import DRUG_NAME
from .store import DISEASE, NCT_ID
from .utils import disease_match

logger = logging.getLogger(__name__)

class RecommendationStatus(Enum):
    OK = "ok"
    NO_TRIAL_DRUGS = "no_trial_drugs"
    NO_OVERLAPPING_DISEASES = "no_overlapping_diseases"
    NO_NOVEL_CANDIDATES = "no_novel_candidates"

@dataclass(frozen=True)
class Recommendation:
    drug: str
    count: int
    diseases: list[str]
    ncts: list[str]

@dataclass(frozen=True)
class RecommendationResult:
    recommendations: list[Recommendation]
    status: RecommendationStatus
    selected_drugs: frozenset[str] = field(default_factory=frozenset)
    similar_diseases: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.recommendations

def _empty_status(selected_drugs, similar_diseases) -> RecommendationStatus:
    if not selected_drugs:
        return RecommendationStatus.NO_TRIAL_DRUGS
    if not similar_diseases:
        return RecommendationStatus.NO_OVERLAPPING_DISEASES
    return RecommendationStatus.NO_NOVEL_CANDIDATES

def recommend_drugs(trial_links: pd.DataFrame, disease: str, limit: int = 5) -> RecommendationResult:
    rows = list(zip(trial_links[DISEASE], trial_links[DRUG_NAME], trial_links[NCT_ID])) if not trial_links.empty else []

    selected_drugs = {drug for d, drug, _ in rows if disease_match(d, disease)}

    disease_to_drugs: dict[str, set[str]] = {}
    for d, drug, _ in rows:
        if not d:
            continue
        disease_to_drugs.setdefault(d, set()).add(drug)

    similar = [
        d for d, drugs in disease_to_drugs.items()
        if not disease_match(d, disease) and not drugs.isdisjoint(selected_drugs)
    ]
    is_similar = set(similar)

    stats: dict[str, tuple[set[str], set[str]]] = {}
    for d, drug, nct in rows:
        if d not in is_similar or drug in selected_drugs:
            continue
        ncts, diseases = stats.setdefault(drug, (set(), set()))
        ncts.add(nct)
        diseases.add(d)

    ranked = sorted(
        (Recommendation(drug=drug, count=len(ncts), diseases=sorted(diseases), ncts=sorted(ncts))
         for drug, (ncts, diseases) in stats.items()),
        key=lambda r: (-r.count, r.drug),
    )[:limit]

    status = RecommendationStatus.OK if ranked else _empty_status(selected_drugs, similar)
    logger.debug("recommendations for %r: %d selected drugs, %d similar diseases, status=%s",
                 disease, len(selected_drugs), len(similar), status.value)
    return RecommendationResult(
        recommendations=ranked,
        status=status,
        selected_drugs=frozenset(selected_drugs),
        similar_diseases=tuple(sorted(similar)),
    )
