"""Patterns and frame rendering for life boards"""

from .patterns import get_pattern, get_all_patterns, pattern_names, PATTERN_CATEGORIES
from .rendering import RenderSink, TextSink, CursesSink

__all__ = [
    'get_pattern',
    'get_all_patterns',
    'pattern_names',
    'PATTERN_CATEGORIES',
    'RenderSink',
    'TextSink',
    'CursesSink',
]
