"""Experiment drivers: run suites, aggregate per-run results, export tables."""
