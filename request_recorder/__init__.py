"""Cloud-function handler that records inbound events in a key-value table."""

__version__ = "0.1.0"
