"""API module for evstats.

- Validates query parameters
- Returns aggregate payloads for a UI
- Forbidden: writing the dataset, caching results
"""
