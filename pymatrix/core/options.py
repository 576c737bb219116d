"""
Option string constants for pymatrix.

This module is the SINGLE SOURCE OF TRUTH for option strings accepted by
keyword arguments such as ``extrema=`` and ``shape_check=``.
Import from here, never use raw strings inside the library.

Usage:
    from pymatrix.core.options import EXTREMA_LEGACY

    m.max(extrema=EXTREMA_LEGACY)
"""

from typing import Literal

# max()/min() report the largest/smallest element actually present
EXTREMA_DATA = 'data'

# max() seeded at 0.0 and min() at the largest finite float64; an
# all-negative matrix then reports max() == 0.0
EXTREMA_LEGACY = 'legacy'

ALL_EXTREMA = frozenset({EXTREMA_DATA, EXTREMA_LEGACY})

# sub() requires equal row counts AND equal column counts
SHAPE_CHECK_STRICT = 'strict'

# sub() rejects a pair only when rows AND cols both differ
SHAPE_CHECK_LEGACY = 'legacy'

ALL_SHAPE_CHECKS = frozenset({SHAPE_CHECK_STRICT, SHAPE_CHECK_LEGACY})

ExtremaMode = Literal['data', 'legacy']
ShapeCheck = Literal['strict', 'legacy']

__all__ = [
    'EXTREMA_DATA',
    'EXTREMA_LEGACY',
    'ALL_EXTREMA',
    'SHAPE_CHECK_STRICT',
    'SHAPE_CHECK_LEGACY',
    'ALL_SHAPE_CHECKS',
    'ExtremaMode',
    'ShapeCheck',
]
