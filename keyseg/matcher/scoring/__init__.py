# Path: keyseg/matcher/scoring/__init__.py
"""
Scoring Module

Components for weighing and ranking analysis results:
- SegmentationWeigher: Sums keyword weights of a segmentation
- TermWeigher: Weighs a term over its segmentations
- Tiebreaker: Ranks terms and resolves equal weights
"""

from .weighing import SegmentationWeigher, TermWeigher
from .tiebreaker import Tiebreaker

__all__ = [
    'SegmentationWeigher',
    'TermWeigher',
    'Tiebreaker',
]
