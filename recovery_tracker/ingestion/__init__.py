"""
Ingestion layer — SpaceX API client and raw-record normalization.

Submodules:
  spacex_client — HTTP client for /cores, /landpads, /launches (+ fixtures)
  normalize     — Raw dict → frozen model mapping with zero-coalesced counts
"""
