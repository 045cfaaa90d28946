"""PTE Academic "Summarize Written Text" scoring service."""

__version__ = "2.1.0"
