"""
Reporters package for photodir.
"""

from .json_reporter import JsonReporter, write_json

__all__ = ['JsonReporter', 'write_json']
