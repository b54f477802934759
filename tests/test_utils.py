"""Tests for multi-value splitting, disease matching and link helpers."""

import math

from trex_dashboard.core.utils import (
    disease_match, split_multi, suggest_diseases, trial_links, trial_url, pubmed_url,
)


class TestSplitMulti:
    """Splitting of comma / semicolon / slash separated cells."""

    def test_mixed_separators(self):
        assert split_multi("a, b;c/ d") == ["a", "b", "c", "d"]

    def test_empty_and_missing(self):
        assert split_multi("") == []
        assert split_multi(None) == []
        assert split_multi(math.nan) == []

    def test_runs_of_separators_and_blank_pieces(self):
        assert split_multi("PHASE1//PHASE2;, ;") == ["PHASE1", "PHASE2"]

    def test_duplicates_and_order_kept(self):
        assert split_multi("DRUG/DEVICE/DRUG") == ["DRUG", "DEVICE", "DRUG"]


class TestDiseaseMatch:
    """Case and whitespace insensitive disease equality."""

    def test_trim_and_case(self):
        assert disease_match(" Lupus ", "lupus") is True

    def test_different_labels(self):
        assert disease_match("Lupus", "Lupus2") is False

    def test_missing_sides(self):
        assert disease_match(None, "x") is False
        assert disease_match("x", None) is False
        assert disease_match("", "") is False
        assert disease_match(math.nan, "x") is False

    def test_no_partial_matching(self):
        assert disease_match("Systemic Lupus", "Lupus") is False


class TestSuggestDiseases:
    """Autocomplete suggestions for the disease search box."""

    DISEASES = ["Lupus Nephritis", "Arthritis", "lupus", "Psoriatic Arthritis", "Gout"]

    def test_substring_case_insensitive_sorted(self):
        assert suggest_diseases("LUP", self.DISEASES) == ["Lupus Nephritis", "lupus"]
        assert suggest_diseases("arth", self.DISEASES) == ["Arthritis", "Psoriatic Arthritis"]

    def test_empty_query(self):
        assert suggest_diseases("", self.DISEASES) == []

    def test_limit(self):
        diseases = [f"Disease {i:02d}" for i in range(25)]
        out = suggest_diseases("disease", diseases, limit=10)
        assert out == diseases[:10]


class TestLinks:
    """ClinicalTrials.gov and PubMed links."""

    def test_urls(self):
        assert trial_url("NCT01234567") == "https://clinicaltrials.gov/study/NCT01234567"
        assert pubmed_url("12345") == "https://pubmed.ncbi.nlm.nih.gov/12345/"

    def test_trial_links_markdown(self):
        out = trial_links(["NCT1", "NCT2"])
        assert out == (
            "[NCT1](https://clinicaltrials.gov/study/NCT1), "
            "[NCT2](https://clinicaltrials.gov/study/NCT2)"
        )
        assert trial_links([]) == "—"
