"""In-memory tables of string records with comma-separated file persistence, SHA-256 accounts and an interactive command line."""

__version__ = "0.1.0"