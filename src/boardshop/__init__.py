"""Boardshop - backend for an online skateboard shop."""

__version__ = "0.1.0"
