"""HTTP boundary for dataset upload and playback.

This module maps dataset service operations onto FastAPI routes.
"""
