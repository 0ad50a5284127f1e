"""Global constants for the rectatlas library.

This module contains the default atlas configuration and the tuning
constants shared by the packing strategies and the bin-size optimizer.
"""

DEFAULT_MAX_WIDTH = 1024
DEFAULT_MAX_HEIGHT = 1024
DEFAULT_ALLOW_FLIPPING = True

# Maximum number of remainder spaces a single split may create
MAX_SPLITS = 2

# Step size at which the bin-size search stops shrinking
DEFAULT_DISCARD_STEP = 1


class PackerTypes:
    """Names of the available packing strategies.

    These are the string identifiers accepted wherever a packer kind
    can be given by name.
    """

    SPLIT = "SPLIT"
    SKYLINE = "SKYLINE"
    STRIP = "STRIP"
