"""
Engineering constants for cycloidal drive calculations.

This module centralizes the numerical constants used by the profile
generator, the physics analysis and the quality rules. Each constant is
documented with where it comes from (geometry, numerical robustness, or
engineering practice).

MODIFICATION GUIDELINES:
- Engineering practice constants may be adjusted based on experience
- Add new constants here rather than hardcoding in functions
- Always include units in constant names (_MM, _DEG)

Constants are grouped by category:
- Sampling: curve sampling defaults and degeneracy limits
- Physics: pressure angle thresholds
- Quality rules: heuristic factors for the design-rule checks
- Export: numeric formatting of interchange documents
"""

# =============================================================================
# Sampling
# =============================================================================

# Default samples per revolution - a full recompute stays cheap at this size
DEFAULT_RESOLUTION: int = 720

# Smallest resolution that still describes a closed outline
MIN_RESOLUTION: int = 3

# Fewest ring pins for a working drive
MIN_PIN_COUNT: int = 4

# Tangent magnitude below which a sample is treated as a cusp and dropped
TANGENT_EPSILON: float = 1e-6

# Curvature denominators smaller than this are inflections (infinite radius)
CURVATURE_DENOMINATOR_EPSILON: float = 1e-12

# =============================================================================
# Physics
# =============================================================================

# Above this the drive loses efficiency and risks self-locking (advisory)
PRESSURE_ANGLE_WARNING_DEG: float = 45.0

# =============================================================================
# Quality Rules (engineering judgment, not standardized)
# =============================================================================

# Max safe eccentricity = R / (factor x N)
ECCENTRICITY_SAFE_FACTOR: float = 1.5

# Corrective eccentricity = R / (factor x N), and R = E x factor x N
ECCENTRICITY_FIX_FACTOR: float = 2.0

# Pin diameter may use at most this share of the pin spacing
PIN_SPACING_LIMIT: float = 0.95

# Corrective pin diameter as share of the pin spacing
PIN_SPACING_FIX: float = 0.9

# Wall between the approximate disc root and the center bore
MIN_WALL_MARGIN_MM: float = 1.5

# Margin left when shrinking the center bore, and its smallest size
HOLE_FIX_MARGIN_MM: float = 2.0
MIN_HOLE_RADIUS_MM: float = 2.0

# =============================================================================
# Export
# =============================================================================

# Decimal places for every numeric field of the DXF document
DXF_PRECISION: int = 4

DXF_PROFILE_LAYER: str = "CycloidProfile"
DXF_HOLE_LAYER: str = "CenterHole"

# Blank border around the disc in SVG drawings
SVG_MARGIN_MM: float = 5.0
