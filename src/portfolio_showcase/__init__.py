"""Portfolio Showcase: a read-only REST backend over a table of portfolio items."""

__version__ = "0.1.0"
