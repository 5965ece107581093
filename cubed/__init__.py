"""Raycasting maze explorer for .cub scene files, with its helper utilities."""

__version__ = "0.1.0"