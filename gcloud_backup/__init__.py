"""Export Google Compute Engine resources to a JSON backup document."""

__version__ = "0.1.0"
VERSION = f"v{__version__}"

__all__ = ["VERSION", "__version__"]
