"""Tests for the record store and drug category resolver."""

import pandas as pd

from trex_dashboard.core.categories import CategoryResolver, UNKNOWN_CATEGORY
from trex_dashboard.core.store import RecordStore, as_frame


class TestAsFrame:
    """Normalisation of row records into string DataFrames."""

    def test_missing_columns_become_blank(self):
        df = as_frame([{"Disease": "Lupus"}], ["Disease", "Drug Name"])
        assert list(df["Drug Name"]) == [""]

    def test_none_values_become_blank(self):
        df = as_frame([{"Disease": None, "Drug Name": "A"}], ["Disease", "Drug Name"])
        assert list(df["Disease"]) == [""]

    def test_empty_input_keeps_columns(self):
        df = as_frame(None, ["Disease"])
        assert df.empty
        assert "Disease" in df.columns

    def test_dataframe_input_not_mutated(self):
        raw = pd.DataFrame({"Disease": ["Lupus"]})
        as_frame(raw, ["Disease", "NCT ID"])
        assert list(raw.columns) == ["Disease"]


class TestRecordStore:
    """Store construction, existence checks and indexes."""

    def test_distinct_diseases(self, store):
        assert store.distinct_diseases() == ["Arthritis", "LUPUS", "Lupus", "Psoriasis", "lupus "]

    def test_distinct_diseases_skips_empty(self):
        store = RecordStore.build(trials=[{"Disease": ""}, {"Disease": "Gout"}])
        assert store.distinct_diseases() == ["Gout"]

    def test_summary(self, store):
        assert store.summary() == {
            "trials": 4,
            "trial_links": 5,
            "publication_links": 4,
            "publications": 3,
            "drugs": 4,
        }

    def test_has_data(self, store):
        assert store.has_data()
        assert not RecordStore.build().has_data()

    def test_drugs_by_trial_index(self, store):
        assert store.drugs_by_trial == {"1": ("A",), "2": ("B",), "3": ("A", "C"), "4": ("C",)}

    def test_from_datasets(self):
        store = RecordStore.from_datasets({"trial_links": [{"Disease": "Gout", "Drug Name": "X", "NCT ID": "9"}]})
        assert store.summary()["trial_links"] == 1
        assert store.trials.empty


class TestCategoryResolver:
    """Drug name to ATC 1st level lookup."""

    def test_first_entry_wins(self, store):
        assert store.categories.category_of("A") == "L"

    def test_unknown_for_missing_or_blank(self, store):
        assert store.categories.category_of("C") == UNKNOWN_CATEGORY
        assert store.categories.category_of("D") == UNKNOWN_CATEGORY

    def test_exact_untrimmed_match(self, store):
        assert store.categories.category_of(" A") == UNKNOWN_CATEGORY
        assert store.categories.category_of("a") == UNKNOWN_CATEGORY

    def test_empty_dictionary(self):
        resolver = CategoryResolver.from_frame(pd.DataFrame())
        assert len(resolver) == 0
        assert resolver.category_of("A") == UNKNOWN_CATEGORY
