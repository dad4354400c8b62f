"""Resource hub: project distribution backend with marketplace stats aggregation."""

__version__ = "0.1.0"
