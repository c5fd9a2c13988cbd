"""Table readers for file-backed runs.

They only parse files; column kinds and outcome checks belong to the encoders.
"""

from .tabular_reader import load_from_data_model, load_table, sniff_separator

__all__ = ["load_table", "load_from_data_model", "sniff_separator"]
