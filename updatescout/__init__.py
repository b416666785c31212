"""updatescout: find outdated npm dependencies and rank them for review."""

__version__ = "0.1.0"
