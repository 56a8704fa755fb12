"""VagaGO job listings: job filtering engine and data sources."""

__version__ = "1.0.0"
