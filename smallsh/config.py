import os

SHELL_NAME = "smallsh"

PROMPT = ": "

# Background jobs without an explicit redirect read from / write to here
DEV_NULL = os.devnull

BACKGROUND_MARKER = "&"
REDIRECT_IN = "<"
REDIRECT_OUT = ">"
COMMENT_PREFIX = "#"
PID_TOKEN = "$$"

# At most this many trailing redirect pairs are recognized
MAX_REDIRECTS = 2

FOREGROUND_ONLY_ON = "\nEntering foreground-only mode (& is now ignored)\n" + PROMPT
FOREGROUND_ONLY_OFF = "\nExiting foreground-only mode\n" + PROMPT
