"""Exploratory report on juvenile snowshoe hares at Bonanza Creek."""

__version__ = "0.1.0"
