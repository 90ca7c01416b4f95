"""Constants shared across agentlink."""

AGENTLINK_HOME_EXT = ".agentlink"
AGENTLINK_HOME_ENV = "AGENTLINK_HOME"

# Source document used when neither --source nor config names one
DEFAULT_SOURCE = "./AGENT.md"

BACKUP_SUFFIX = ".backup"
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

LOG_FILE_NAME = "agentlink.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3
