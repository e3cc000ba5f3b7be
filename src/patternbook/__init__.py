"""PATTERNBOOK

A collection of blog posts on object-oriented design patterns, paired with
small, runnable Python examples for every pattern and for the service
container and facade features the framework tutorials walk through.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
