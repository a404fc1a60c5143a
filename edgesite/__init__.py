"""edgesite — build-time tooling for an edge-hosted site."""

__version__ = "0.1.0"
