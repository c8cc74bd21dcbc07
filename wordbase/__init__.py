"""Dictionary and word lookup data types, record formats and HTML rendering."""

__version__ = "0.1.0"