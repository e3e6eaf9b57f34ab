# geokeys/spatial/__init__.py
"""
Spatial Package
"""
from .tile_coder import zxy, decode_zxy

__all__ = [
    'zxy',
    'decode_zxy'
]
