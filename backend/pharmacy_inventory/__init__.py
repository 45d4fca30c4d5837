"""Pharmacy drug inventory store: SQLite-backed Drug table with sale bookkeeping."""

__version__ = "0.1.0"
