"""Command line interface for afm-pack."""
