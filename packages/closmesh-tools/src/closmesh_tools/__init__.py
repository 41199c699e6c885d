"""Shared sizing calculators, comparison, sweep and rendering for closmesh."""
