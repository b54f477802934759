"""Shared fixtures: a small in-memory TrEx landscape."""

import pytest

from trex_dashboard.core.engine import LandscapeEngine
from trex_dashboard.core.store import RecordStore


TRIALS = [
    {"Disease": "Lupus", "Intervention Types": "DRUG, BIOLOGICAL", "Phases": "PHASE2/PHASE3", "NCT ID": "1"},
    {"Disease": "lupus ", "Intervention Types": "DRUG", "Phases": "PHASE1", "NCT ID": "2"},
    {"Disease": "Arthritis", "Intervention Types": "DRUG;DEVICE", "Phases": "PHASE4", "NCT ID": "3"},
    {"Disease": "Arthritis", "Intervention Types": "", "Phases": "PHASE3B", "NCT ID": "4"},
]

TRIAL_LINKS = [
    {"Disease": "Lupus", "Drug Name": "A", "NCT ID": "1"},
    {"Disease": "Lupus", "Drug Name": "B", "NCT ID": "2"},
    {"Disease": "Arthritis", "Drug Name": "A", "NCT ID": "3"},
    {"Disease": "Arthritis", "Drug Name": "C", "NCT ID": "3"},
    {"Disease": "Arthritis", "Drug Name": "C", "NCT ID": "4"},
]

PUBLICATION_LINKS = [
    {"Disease": "Lupus", "Drug Name": "A", "PMID": "100"},
    {"Disease": "Lupus", "Drug Name": "D", "PMID": "101"},
    {"Disease": "Lupus", "Drug Name": "A", "PMID": "102"},
    {"Disease": "Psoriasis", "Drug Name": "E", "PMID": "103"},
]

PUBLICATIONS = [
    {"Disease": "Lupus", "PublicationTypes": "Journal Article; Review", "PMID": "100"},
    {"Disease": "LUPUS", "PublicationTypes": "Journal Article", "PMID": "101"},
    {"Disease": "Psoriasis", "PublicationTypes": "Case Reports", "PMID": "103"},
]

DRUGS = [
    {"Drug Name": "A", "ATC 1st Level": "L"},
    {"Drug Name": "B", "ATC 1st Level": "M"},
    {"Drug Name": "A", "ATC 1st Level": "N"},
    {"Drug Name": "D", "ATC 1st Level": ""},
]


@pytest.fixture
def store():
    return RecordStore.build(
        trials=TRIALS,
        trial_links=TRIAL_LINKS,
        publication_links=PUBLICATION_LINKS,
        publications=PUBLICATIONS,
        drugs=DRUGS,
    )


@pytest.fixture
def engine(store):
    return LandscapeEngine(store)
