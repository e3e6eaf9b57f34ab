# geokeys/results/__init__.py
"""
Results Package
"""
from .feature_assembler import MatchRecord, SearchContext, ValidationError, to_feature

__all__ = [
    'MatchRecord',
    'SearchContext',
    'ValidationError',
    'to_feature'
]
