"""Catalog ingestion and reconciliation for e-commerce platforms."""

__version__ = "0.1.0"
