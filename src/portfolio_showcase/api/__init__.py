"""HTTP API for the portfolio showcase."""
