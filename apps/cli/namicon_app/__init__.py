"""Command line front-end for namicon badge generation."""
