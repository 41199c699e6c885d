"""Shared models, loaders and validation for closmesh fabric sizing."""
