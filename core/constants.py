# /history pagination
HISTORY_DEFAULT_LIMIT = 10
HISTORY_MIN_LIMIT = 1
HISTORY_MAX_LIMIT = 50

RANDOM_DIGITS = 6

TEST_MESSAGE = "Test endpoint reached"
SAVE_ERROR_MESSAGE = "Unable to save random value"
HISTORY_ERROR_MESSAGE = "Unable to fetch history"
UNKNOWN_ERROR_MESSAGE = "Unknown error"
