"""Markdown reference documents for click and typer command trees."""

__version__ = "0.1.0"
