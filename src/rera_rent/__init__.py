"""Dubai rent increase checker (RERA Decree No. 43 of 2013)."""

__version__ = "0.1.0"
