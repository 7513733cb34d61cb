"""Aggregators, one per logical endpoint."""
