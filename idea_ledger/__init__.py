"""Idea Ledger: entity store and consistency engine for idea management."""

__version__ = "1.0.0"
