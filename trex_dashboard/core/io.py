from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Mapping

import pandas as pd
import streamlit as st

from trex_dashboard import config
from .store import RecordStore

logger = logging.getLogger(__name__)

class DatasetLoadError(RuntimeError):
    """A dataset could not be fetched or parsed."""

    def __init__(self, name: str, source: str, reason: str):
        super().__init__(f"Failed to load dataset '{name}' from {source}: {reason}")
        self.name = name
        self.source = source

def load_csv(source: str) -> pd.DataFrame:
    """Read a CSV (optionally .gz) from a path or URL, keeping every value as text."""
    return pd.read_csv(
        source,
        dtype=str,
        keep_default_na=False,
        compression="infer",
        skip_blank_lines=True,
    )

def load_datasets(sources: Mapping[str, str],
                  max_workers: int = config.LOAD_MAX_WORKERS) -> dict[str, pd.DataFrame]:
    """Load every source in parallel; return only when all succeed, raise on the first failure."""
    frames: dict[str, pd.DataFrame] = {}
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(load_csv, src): name for name, src in sources.items()}
        for future in as_completed(futures):
            name = futures[future]
            try:
                frames[name] = future.result()
            except Exception as e:
                logger.error(f"Failed to load {name} from {sources[name]}: {e}")
                for pending in futures:
                    pending.cancel()
                raise DatasetLoadError(name, sources[name], str(e)) from e
            logger.info(f"Loaded {name}: {len(frames[name])} rows")
    return frames

def build_store(sources: Mapping[str, str] | None = None) -> RecordStore:
    sources = sources or config.dataset_sources()
    logger.info(f"Loading {len(sources)} datasets")
    return RecordStore.from_datasets(load_datasets(sources))

@st.cache_resource(show_spinner="Loading trial and publication datasets…")
def load_store(source_items: tuple[tuple[str, str], ...]) -> RecordStore:
    """Process-wide cached store; `source_items` is a hashable form of the sources mapping."""
    return build_store(dict(source_items))
