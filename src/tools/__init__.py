"""Command line and reporting helpers around the solver."""
