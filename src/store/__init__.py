"""In-memory dataset storage.

This module owns the current record sequence and its serving cursor.
It powers round-robin playback for the API and SDK.
"""
