"""Refresh entry point: runs every aggregation for one disease selection."""

from __future__ import annotations
import logging
from dataclasses import dataclass, field

from trex_dashboard import config
from .aggregation import distribution_by, filter_disease, phase34_drugs, top_n_drugs
from .categories import DRUG_NAME
from .recommend import RecommendationResult, RecommendationStatus, recommend_drugs
from .store import (
    DISEASE, INTERVENTION_TYPES, NCT_ID, PHASES, PMID, PUBLICATION_TYPES, RecordStore,
)
from .utils import pubmed_url, trial_url

logger = logging.getLogger(__name__)

SOURCE_CT = "ct"
SOURCE_PUBMED = "pubmed"

RECOMMENDATION_NOTES = {
    RecommendationStatus.OK: "",
    RecommendationStatus.NO_TRIAL_DRUGS: (
        "No clinical-trial drugs found for this disease. "
        "Add CDI/CT data to generate recommendations."
    ),
    RecommendationStatus.NO_OVERLAPPING_DISEASES: "No other diseases share drugs with the selected disease.",
    RecommendationStatus.NO_NOVEL_CANDIDATES: (
        "No candidate drugs found that are not already tested for the selected disease."
    ),
}

@dataclass(frozen=True)
class ResultRow:
    id: str
    disease: str
    drug: str
    source: str

    @property
    def url(self) -> str:
        return trial_url(self.id) if self.source == SOURCE_CT else pubmed_url(self.id)

@dataclass(frozen=True)
class AggregationResult:
    disease: str
    include_secondary: bool
    interventions: dict[str, int]
    phases: dict[str, int]
    publication_types: dict[str, int]
    trial_categories: dict[str, int]
    publication_categories: dict[str, int]
    top_trial_drugs: list[tuple[str, int]]
    top_publication_drugs: list[tuple[str, int]]
    phase34_drugs: list[str]
    recommendations: RecommendationResult
    rows: list[ResultRow] = field(default_factory=list)

    @property
    def recommendation_note(self) -> str:
        return RECOMMENDATION_NOTES[self.recommendations.status]

class LandscapeEngine:
    """Aggregation and recommendation over an immutable RecordStore."""

    def __init__(self, store: RecordStore,
                 top_n: int = config.TOP_N_DRUGS,
                 max_recommendations: int = config.TOP_N_RECOMMENDATIONS):
        self.store = store
        self.top_n = top_n
        self.max_recommendations = max_recommendations

    def distinct_diseases(self) -> list[str]:
        return self.store.distinct_diseases()

    def refresh(self, disease: str, include_secondary: bool) -> AggregationResult:
        if not disease or not disease.strip():
            raise ValueError("refresh() needs a non-empty disease")
        disease = disease.strip()
        s = self.store

        if include_secondary:
            publication_types = distribution_by(s.publications, disease, PUBLICATION_TYPES, multi_valued=True)
            publication_categories = distribution_by(
                s.publication_links, disease, DRUG_NAME, value_of=s.categories.category_of)
            top_publication_drugs = top_n_drugs(s.publication_links, disease, self.top_n)
        else:
            publication_types, publication_categories, top_publication_drugs = {}, {}, []

        result = AggregationResult(
            disease=disease,
            include_secondary=include_secondary,
            interventions=distribution_by(s.trials, disease, INTERVENTION_TYPES, multi_valued=True),
            phases=distribution_by(s.trials, disease, PHASES, multi_valued=True),
            publication_types=publication_types,
            trial_categories=distribution_by(s.trial_links, disease, DRUG_NAME, value_of=s.categories.category_of),
            publication_categories=publication_categories,
            top_trial_drugs=top_n_drugs(s.trial_links, disease, self.top_n),
            top_publication_drugs=top_publication_drugs,
            phase34_drugs=phase34_drugs(s.trials, s.drugs_by_trial, disease),
            recommendations=recommend_drugs(s.trial_links, disease, self.max_recommendations),
            rows=self.result_rows(disease, include_secondary),
        )
        logger.info("Refreshed %r (pubmed=%s): %d rows, %d phase 3/4 drugs, recommendations=%s",
                    disease, include_secondary, len(result.rows), len(result.phase34_drugs),
                    result.recommendations.status.value)
        return result

    def result_rows(self, disease: str, include_secondary: bool) -> list[ResultRow]:
        ct = filter_disease(self.store.trial_links, disease)
        rows = [ResultRow(id=r[NCT_ID], disease=r[DISEASE], drug=r[DRUG_NAME], source=SOURCE_CT)
                for _, r in ct.iterrows()]
        if include_secondary:
            pub = filter_disease(self.store.publication_links, disease)
            rows += [ResultRow(id=r[PMID], disease=r[DISEASE], drug=r[DRUG_NAME], source=SOURCE_PUBMED)
                     for _, r in pub.iterrows()]
        return rows
