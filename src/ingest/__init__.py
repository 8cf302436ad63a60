"""Transaction ingestion.

This package reads transaction files into typed records.
It is the only layer that touches source file formats.
"""
