"""Static lookup tables used by the name extraction pipeline."""
