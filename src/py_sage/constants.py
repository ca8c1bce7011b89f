"""Constants for wallet metadata and sync notifications."""

# Event name the UI listens on for sync notifications
SYNC_EVENT_NAME = "sync-event"

# Collection attribute kind holding the collection icon URI
ICON_ATTRIBUTE_KIND = "icon"

# Default metadata format tag
CHIP_0007_FORMAT = "CHIP-0007"

# Timeout for a single off-chain metadata request, seconds
METADATA_FETCH_TIMEOUT = 30

BYTES32_LENGTH = 32

# Largest accepted off-chain metadata blob, bytes
METADATA_MAX_SIZE = 1024 * 1024
