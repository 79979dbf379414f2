# domain/geometry/constants.py
"""Constants for tuple arithmetic."""

# Default tolerance for floating-point comparisons
EPSILON = 0.0001

# Conventional w components
POINT_W = 1.0
VECTOR_W = 0.0
