from __future__ import annotations


class HareEdaError(Exception):
    """Base class for errors that abort a report run."""


class SchemaError(HareEdaError, ValueError):
    """Input table is missing required columns."""


class DataParseError(HareEdaError, ValueError):
    """A date or numeric field could not be parsed."""


class InsufficientDataError(HareEdaError, ValueError):
    """A group has too few valid values for the requested statistic."""


class LoadError(HareEdaError, ValueError):
    """Input could not be located or read as a delimited table."""
