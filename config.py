"""
Configuration file for the upper-envelope containers and the demo.

Contains both INTEGER and FLOAT parameter sets for the demo run.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True to generate integer coefficients (floor-division boundaries)
INTEGER_MODE = True


# ---------------------------------------------------------------
# CONTAINER BEHAVIOUR
# ---------------------------------------------------------------

# MonotonicEnvelope raises OrderViolationError on decreasing input
CHECK_MONOTONIC_ORDER = True


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

OUTPUT_FOLDER = "output"


# ===============================================================
# INTEGER-MODE PARAMETERS
# ===============================================================

INTEGER = {
    "SLOPE_RANGE": (-20, 20),
    "INTERCEPT_RANGE": (-500, 500),
    "QUERY_RANGE": (-100, 100),
}


# ===============================================================
# FLOAT-MODE PARAMETERS
# ===============================================================

FLOAT = {
    "SLOPE_RANGE": (-2.0, 2.0),
    "INTERCEPT_RANGE": (-50.0, 50.0),
    "QUERY_RANGE": (-100.0, 100.0),
}


# ---------------------------------------------------------------
# SHARED DEMO PARAMETERS
# ---------------------------------------------------------------

DEMO_LINE_COUNT = 40
DEMO_QUERY_COUNT = 200
DEMO_SEED = 7

CANVAS_SIZE = (600, 800)           # (height, width) in pixels
CANVAS_MARGIN = 20


# ---------------------------------------------------------------
# VISUALIZATION COLORS
# ---------------------------------------------------------------

COLOR_LINE = (160, 160, 160)       # inserted lines - gray
COLOR_ENVELOPE = (0, 0, 255)       # upper envelope - red
COLOR_BREAKPOINT = (255, 0, 0)     # envelope breakpoints - blue
COLOR_BACKGROUND = (255, 255, 255) # white


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by the containers and the demo so they only import one dictionary.
    """

    base = {
        "CHECK_MONOTONIC_ORDER": CHECK_MONOTONIC_ORDER,
        "DEMO_LINE_COUNT": DEMO_LINE_COUNT,
        "DEMO_QUERY_COUNT": DEMO_QUERY_COUNT,
        "DEMO_SEED": DEMO_SEED,
        "CANVAS_SIZE": CANVAS_SIZE,
        "CANVAS_MARGIN": CANVAS_MARGIN,
        "INTEGER_MODE": INTEGER_MODE,
    }

    # Merge in integer or float mode values
    if INTEGER_MODE:
        base.update(INTEGER)
    else:
        base.update(FLOAT)

    return base
