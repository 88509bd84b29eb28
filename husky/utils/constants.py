"""Conversion constants used by the husky unit tables.

Length factors are exact by definition (international yard and pound
agreement, 1959; nautical mile, 1929). Temperature offsets follow
NIST SP 811, appendix B.9.
"""

# Length: value of one unit in meters
FOOT_TO_M = 0.3048
INCH_TO_M = 0.0254
YARD_TO_M = 0.9144
MILE_TO_M = 1609.344
NAUTICAL_MILE_TO_M = 1852.0

# Length: value of one unit in kilometers
MILE_TO_KM = 1.609344
NAUTICAL_MILE_TO_KM = 1.852

# Temperature
T_CELSIUS_OFFSET = 273.15  # K at 0 °C
T_FAHRENHEIT_FREEZE = 32.0  # °F at 0 °C
T_RANKINE_OFFSET = 459.67  # °R at 0 °F
