# geokeys/utilities/__init__.py
"""
Utilities Package
"""
from .code_resolver import resolve_code, encode_code
from .config_manager import ConfigManager

__all__ = [
    'resolve_code',
    'encode_code',
    'ConfigManager'
]
