"""
Central configuration for the Tally expense tracker.

Tally keeps no persisted configuration. These constants are the only knobs;
the log level can additionally be set through the TALLY_LOG_LEVEL environment
variable or the --log-level CLI option.
"""

APP_NAME = "Tally"
ORGANIZATION_NAME = "Tally"
ORGANIZATION_DOMAIN = "tally.local"

WINDOW_TITLE = "Expense Tracker"
WINDOW_MIN_WIDTH = 640
WINDOW_MIN_HEIGHT = 720

CURRENCY_SYMBOL = "$"
AMOUNT_CHARACTERS = "0123456789."

LOG_LEVEL_ENV_VAR = "TALLY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
