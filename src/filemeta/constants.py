"""Constants used across filemeta."""

# Characters rejected anywhere in a file path
INVALID_PATH_CHARACTERS = '<>:"|?*'

# Read size for checksum streaming (64 KiB)
CHUNK_SIZE = 64 * 1024

# Multipliers applied to a byte count, keyed by lower-cased unit name.
# Singular and plural spellings are both accepted.
SIZE_UNITS: dict[str, float] = {
    "bit": 8,
    "bits": 8,
    "byte": 1,
    "bytes": 1,
    "kilobyte": 1 / 1024,
    "kilobytes": 1 / 1024,
    "megabyte": 1 / (1024 * 1024),
    "megabytes": 1 / (1024 * 1024),
    "gigabyte": 1 / (1024 * 1024 * 1024),
    "gigabytes": 1 / (1024 * 1024 * 1024),
}

DEFAULT_UNIT = "bytes"

INVALID_UNIT_MESSAGE = (
    "Please provide a valid unit. Use bit, byte, kilobyte, megabyte, or gigabyte."
)
UNSUPPORTED_UNIT_MESSAGE = (
    "Unsupported unit. Please use bit, byte, kilobyte, megabyte, or gigabyte."
)
UNKNOWN_SIZE_MESSAGE = "Unable to retrieve file size"

MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

LOG_LEVEL_ENV_VAR = "FILEMETA_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
