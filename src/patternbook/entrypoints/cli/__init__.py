"""The ``patternbook`` command-line interface."""
