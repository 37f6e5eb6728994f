"""Launcher utilities for Sliding Tiles."""
