"""Small simulations, a key-value store and a tiny web server."""

__version__ = "0.1.0"