"""Default values for the security service."""

# Minimum confidence (percent) the cat detector must reach to report a cat
CAT_CONFIDENCE_THRESHOLD = 50.0

DEFAULT_CONFIG_FILE = "scenario.yaml"
