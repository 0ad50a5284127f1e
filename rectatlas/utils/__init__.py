"""Utility modules for the rectatlas library.

This package contains:
- rects: Geometry primitives shared by every packer
- occupancy: Coverage and overlap checks for finished layouts
- packers: The packing strategies and the drivers built on them
"""
