"""Default eligibility thresholds.

Only the composition root reads these; rules always receive their
thresholds explicitly.
"""

DEFAULT_REQUIRED_AGE = 18

# grams per litre
DEFAULT_ALLOWED_ALCOHOL_LEVEL = 0.49
