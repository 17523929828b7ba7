from .image import ImageSource, decode_data_url, load_image
from .table import TableLayout, justify_cell, layout, validate_table, wrap_rows

__all__ = [
    "decode_data_url",
    "ImageSource",
    "justify_cell",
    "layout",
    "load_image",
    "TableLayout",
    "validate_table",
    "wrap_rows",
]
