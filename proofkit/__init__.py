"""proofkit — choose proof-system adapters, platforms and architectures."""

__version__ = "0.1.0"
