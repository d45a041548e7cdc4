"""Canvas-style pie and bar charts rendered onto pluggable drawing surfaces."""

__version__ = "0.1.0"
