"""
Constants for PyUpsample.

Numerical constants shared by the resampling kernels and the command line
interface. Kept in one place so the kernels and the input validation agree on
the supported magnitudes and filter taps.
"""

# Supported magnitudes of the six-tap (SOI) interpolation
MAGNITUDE_DOUBLE = 2
MAGNITUDE_QUADRUPLE = 4
SIXTAP_MAGNITUDES = (MAGNITUDE_DOUBLE, MAGNITUDE_QUADRUPLE)

# Smallest magnitude accepted by the bilinear interpolation
BILINEAR_MIN_MAGNITUDE = 1

# Six-tap half-pel filter, as in H.264 luma sub-pixel interpolation
SIX_TAP_WEIGHTS = (1, -5, 20, 20, -5, 1)
SIX_TAP_ROUNDING = 16
SIX_TAP_DIVISOR = 32

# Replicated border needed on each side for six valid taps
SIX_TAP_MARGIN = 2

# Rounding offset and divisor of the quarter-pel averaging
AVERAGE_ROUNDING = 1
AVERAGE_DIVISOR = 2

# Boundary handling modes for border extension
BOUNDARY_REPLICATE = 0
BOUNDARY_WRAP = 1
BOUNDARY_REFLECT = 2

BOUNDARY_MODES = {
    "replicate": BOUNDARY_REPLICATE,
    "wrap": BOUNDARY_WRAP,
    "reflect": BOUNDARY_REFLECT,
}

# Interpolation methods
METHOD_BILINEAR = "bilinear"
METHOD_SIXTAP = "sixtap"
METHODS = (METHOD_BILINEAR, METHOD_SIXTAP)
DEFAULT_METHOD = METHOD_BILINEAR
