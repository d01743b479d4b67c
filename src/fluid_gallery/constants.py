"""
Constants used internally by the fluid gallery layout engine.

These are implementation-level values that should not be overridden
via config files.
"""

# Multiplier turning a ratio into a percentage
PERCENT = 100

# Supported layout axes
AXIS_HORIZONTAL = "horizontal"
AXIS_VERTICAL = "vertical"
