"""readsync - reading progress sync server for KOReader-compatible clients."""

__version__ = "0.1.0"
