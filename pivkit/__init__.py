"""Pixel types, images and views, geometry, interrogation grids, image expressions and utilities for PIV."""

__version__ = "0.1.0"