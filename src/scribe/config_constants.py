"""Configuration constants for scribe.

Commonly used constants are re-exported from config.py for convenience.
"""

# General defaults
DEFAULT_LOG_LEVEL = "INFO"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Config file location (relative to the user's home directory)
DEFAULT_CONFIG_DIR_NAME = ".scribe"
DEFAULT_CONFIG_FILENAME = "config.yml"
CONFIG_PATH_ENV_VAR = "SCRIBE_CONFIG"

# Output file naming
TRANSCRIPT_SUFFIX = "-transcript"
OUTPUT_EXTENSION = ".txt"

# Action types accepted by the validator (closed set)
ACTION_TYPE_OPENAI = "openai"
VALID_ACTION_TYPES = (ACTION_TYPE_OPENAI,)

# Models known to work with the OpenAI chat completion endpoint.
# Anything else only triggers a warning.
KNOWN_OPENAI_MODELS = (
    "gpt-3.5-turbo",
    "gpt-4",
    "gpt-4-turbo",
    "gpt-4o",
    "gpt-4o-mini",
)

# Sampling bounds
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0

# OpenAI transcription model (whisper-1 is the only option)
DEFAULT_OPENAI_TRANSCRIPTION_MODEL = "whisper-1"

# Console output
TRANSCRIPT_PREVIEW_CHARS = 500
SEPARATOR_WIDTH = 70
