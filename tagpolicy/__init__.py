"""Policies for choosing the latest container image tag, tag filtering and image reference parsing."""

__version__ = "0.1.0"