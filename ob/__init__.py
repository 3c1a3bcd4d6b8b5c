"""ob: build orchestrator for the ockam Go tree."""

__version__ = "0.1.0"
