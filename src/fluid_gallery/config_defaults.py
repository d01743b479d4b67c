"""Shared default values for user-facing configuration settings."""
from fluid_gallery.type_defs import Axis

# Layout
DEFAULT_MARGIN = 0.0
DEFAULT_AXIS: Axis = "horizontal"
DEFAULT_SPAN = 1200.0
