"""Bundle a Node.js project and the node runtime into a single executable."""

__version__ = "0.1.0"
__all__ = ["builder", "cli", "color", "fsutil"]