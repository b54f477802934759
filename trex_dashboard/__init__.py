"""TrEx disease landscape dashboard: trial and literature aggregation with drug recommendations."""
