"""Tatami estimate backend."""
