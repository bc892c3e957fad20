"""Default tolerances and limits for shapemath2d."""

# Degeneracy tolerance used by the line intersection solver.
DEFAULT_TOLERANCE = 1e-4

# Default epsilon for approximate float comparisons.
EPSILON = 1e-6

# Safety valve for the minimum enclosing circle search.
MAX_WELZL_ITERATIONS = 1000

# Decimal places used when writing coordinates to SVG.
SVG_PRECISION = 2

# Step budget per input point used by iteration_limit_for().
WELZL_ITERATIONS_PER_POINT = 100

# Seed for the order in which the enclosing circle search visits points.
WELZL_SHUFFLE_SEED = 0
