"""Dataset ingestion pipeline.

This module turns loosely-typed tag/value payloads into numeric records.
It prepares validated record sequences for the dataset store.
"""
