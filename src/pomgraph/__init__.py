"""Extract an SBOM module graph from a Maven build."""

__version__ = "0.1.0"
