"""Small tools: checksums, MD5, text filters, image approximation, a snake game, a tiny HTTP server and text art."""

__version__ = "0.1.0"