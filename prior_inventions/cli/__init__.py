"""Command line interface for the prior inventions generator."""
