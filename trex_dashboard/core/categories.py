from __future__ import annotations
from typing import Any

import pandas as pd

DRUG_NAME = "Drug Name"
ATC_LEVEL_1 = "ATC 1st Level"
UNKNOWN_CATEGORY = "Unknown"

class CategoryResolver:
    """Top-level ATC category lookup keyed by exact drug name.

    The first dictionary entry for a name wins, even when its category is blank.
    Names are not trimmed or case-folded: " Aspirin" and "Aspirin" are different drugs.
    """

    def __init__(self, categories: dict[str, str]):
        self._categories = categories

    @classmethod
    def from_frame(cls, drugs_df: pd.DataFrame) -> "CategoryResolver":
        if drugs_df is None or drugs_df.empty or DRUG_NAME not in drugs_df.columns:
            return cls({})
        first = drugs_df.drop_duplicates(subset=[DRUG_NAME], keep="first")
        cats = first[ATC_LEVEL_1] if ATC_LEVEL_1 in first.columns else pd.Series("", index=first.index)
        return cls(dict(zip(first[DRUG_NAME], cats)))

    def category_of(self, drug_name: Any) -> str:
        cat = self._categories.get(drug_name)
        return cat if cat else UNKNOWN_CATEGORY

    def __len__(self) -> int:
        return len(self._categories)
