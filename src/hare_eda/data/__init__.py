from .hares import REQUIRED_COLUMNS, juvenile_records, load_hares

__all__ = ["REQUIRED_COLUMNS", "juvenile_records", "load_hares"]
