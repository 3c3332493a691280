"""Output renderers for the module graph."""
