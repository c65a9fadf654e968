"""Tally: a local-only, single-screen expense tracker."""

__version__ = "0.1.0"
