"""Presentation layer: entry points for code that uses datalocations."""
