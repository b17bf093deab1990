"""Type-safe enums for the cycloidal drive calculator."""

from enum import Enum


class DriveConfig(Enum):
    """Which member of the drive is held stationary"""
    HOUSING_FIXED = "housingFixed"  # Reducer mode - output pins turn
    OUTPUT_FIXED = "outputFixed"    # Hub mode - housing turns


class FillRule(Enum):
    """Fill rule a renderer must apply to an emitted path"""
    EVEN_ODD = "evenodd"
    NON_ZERO = "nonzero"
