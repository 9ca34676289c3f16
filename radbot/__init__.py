"""radbot: chat bot command handlers with a context-aware help system."""

__version__ = "1.0.0"
