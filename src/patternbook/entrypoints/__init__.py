"""Entry points for PATTERNBOOK (currently the command-line interface)."""
