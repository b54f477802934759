"""In-memory record store for the five TrEx datasets."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Union

import pandas as pd

from .categories import CategoryResolver, DRUG_NAME, ATC_LEVEL_1
from .utils import unique_preserve

DISEASE = "Disease"
NCT_ID = "NCT ID"
PMID = "PMID"
INTERVENTION_TYPES = "Intervention Types"
PHASES = "Phases"
PUBLICATION_TYPES = "PublicationTypes"

# Columns each dataset must expose; absent ones are added as blanks.
REQUIRED_COLUMNS = {
    "trials": [DISEASE, INTERVENTION_TYPES, PHASES, NCT_ID],
    "trial_links": [DISEASE, DRUG_NAME, NCT_ID],
    "publication_links": [DISEASE, DRUG_NAME, PMID],
    "publications": [DISEASE, PUBLICATION_TYPES, PMID],
    "drugs": [DRUG_NAME, ATC_LEVEL_1],
}

DISEASE_DATASETS = ("trials", "publication_links", "trial_links", "publications")

Records = Optional[Union[pd.DataFrame, Iterable[Mapping[str, Any]]]]

def as_frame(records: Records, columns: list[str]) -> pd.DataFrame:
    """Turn row records into a string-valued DataFrame holding at least `columns`."""
    if records is None:
        df = pd.DataFrame()
    elif isinstance(records, pd.DataFrame):
        df = records.copy()
    else:
        df = pd.DataFrame(list(records))
    for c in columns:
        if c not in df.columns:
            df[c] = ""
    df = df.fillna("")
    return df.astype(str).reset_index(drop=True)

@dataclass(frozen=True)
class RecordStore:
    trials: pd.DataFrame
    trial_links: pd.DataFrame
    publication_links: pd.DataFrame
    publications: pd.DataFrame
    drugs: pd.DataFrame
    categories: CategoryResolver = field(repr=False)
    drugs_by_trial: dict[str, tuple[str, ...]] = field(repr=False)

    @classmethod
    def build(cls,
              trials: Records = None,
              trial_links: Records = None,
              publication_links: Records = None,
              publications: Records = None,
              drugs: Records = None) -> "RecordStore":
        """Normalise the raw datasets and precompute the join indexes once."""
        frames = {
            "trials": as_frame(trials, REQUIRED_COLUMNS["trials"]),
            "trial_links": as_frame(trial_links, REQUIRED_COLUMNS["trial_links"]),
            "publication_links": as_frame(publication_links, REQUIRED_COLUMNS["publication_links"]),
            "publications": as_frame(publications, REQUIRED_COLUMNS["publications"]),
            "drugs": as_frame(drugs, REQUIRED_COLUMNS["drugs"]),
        }
        return cls(
            **frames,
            categories=CategoryResolver.from_frame(frames["drugs"]),
            drugs_by_trial=_index_drugs_by_trial(frames["trial_links"]),
        )

    @classmethod
    def from_datasets(cls, datasets: Mapping[str, Records]) -> "RecordStore":
        return cls.build(**{k: datasets.get(k) for k in REQUIRED_COLUMNS})

    def has_data(self) -> bool:
        return any(not getattr(self, name).empty for name in REQUIRED_COLUMNS)

    def summary(self) -> dict[str, int]:
        return {name: len(getattr(self, name)) for name in REQUIRED_COLUMNS}

    def distinct_diseases(self) -> list[str]:
        values: set[str] = set()
        for name in DISEASE_DATASETS:
            values.update(getattr(self, name)[DISEASE])
        return sorted(v for v in values if v)

def _index_drugs_by_trial(trial_links: pd.DataFrame) -> dict[str, tuple[str, ...]]:
    if trial_links.empty:
        return {}
    grouped = trial_links.groupby(NCT_ID, sort=False)[DRUG_NAME]
    return {nct: tuple(unique_preserve(drugs)) for nct, drugs in grouped}
