# Session keys
SELECTED_DISEASE = "selected_disease"
SEARCH_QUERY = "disease_search"
INCLUDE_PUBMED = "include_pubmed"
COLOR_ASSIGNER = "color_assigner"

DEFAULT_INCLUDE_PUBMED = True
