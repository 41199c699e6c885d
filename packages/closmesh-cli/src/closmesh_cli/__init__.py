"""closmesh command line interface."""
