"""Data models for ghfetch."""

from ghfetch.models.release import Release, Asset

__all__ = ["Release", "Asset"]
