"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_INCLUSION_SCORE = 0
MAX_INCLUSION_SCORE = 100
UNSPECIFIED_ETHNICITY = "Unspecified"
ISO_DATE_FORMAT = "%Y-%m-%d"
