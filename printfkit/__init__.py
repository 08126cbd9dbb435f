"""A printf-style formatter with flags, widths, precisions and custom-base output."""

__version__ = "0.1.0"