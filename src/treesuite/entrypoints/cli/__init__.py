"""Command-line interface for TREESUITE (``treesuite`` console script)."""
