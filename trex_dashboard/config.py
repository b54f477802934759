"""Settings for the TrEx disease landscape dashboard."""

from __future__ import annotations
import os

# --- App metadata ---
APP_TITLE = "TrEx Disease Landscape"
PAGE_ICON = "💊"
LAYOUT = "wide"
INITIAL_SIDEBAR_STATE = "expanded"
APP_VERSION = "1.0.0"

# --- Data sources ---
# Either a base URL or a local directory holding the five CSV exports.
DATA_BASE_URL = os.environ.get(
    "TREX_DATA_BASE_URL",
    "https://raw.githubusercontent.com/Adrian-Golab/TrEx/main",
)

DATASET_FILES = {
    "trials": "CT.csv",
    "publication_links": "PDI.csv",
    "trial_links": "CDI.csv",
    "drugs": "Drugs.csv",
    "publications": "pubmed_small.csv.gz",
}

LOAD_MAX_WORKERS = 5

def dataset_sources(base: str | None = None) -> dict[str, str]:
    """Resolve every dataset key to a full URL or path."""
    base = (base or DATA_BASE_URL).rstrip("/")
    if "://" in base:
        return {key: f"{base}/{name}" for key, name in DATASET_FILES.items()}
    return {key: os.path.join(base, name) for key, name in DATASET_FILES.items()}

# --- Display ---
TOP_N_DRUGS = 10
TOP_N_RECOMMENDATIONS = 5
MAX_SUGGESTIONS = 10

CLINICALTRIALS_STUDY_URL = "https://clinicaltrials.gov/study/{id}"
PUBMED_ARTICLE_URL = "https://pubmed.ncbi.nlm.nih.gov/{id}/"

# --- Logging ---
LOG_LEVEL = os.environ.get("TREX_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(funcName)s - %(message)s"
