"""Shared constants for the launcher."""

APP_ID = "com.github.jstaf.onedriver"  # GTK application id

ONEDRIVER_SERVICE_TEMPLATE = "onedriver@.service"

LAUNCHER_HOME_ENV = "ONEDRIVER_LAUNCHER_HOME"

# Words shown to the user for a unit's state; nothing else is ever displayed
ACTIVE_TEXT = "active"
INACTIVE_TEXT = "off"
ENABLED_TEXT = "enabled"
DISABLED_TEXT = "disabled"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Display width constant - standardize to 80 characters max
MAX_DISPLAY_WIDTH = 80

# Seconds to wait for a freshly started mount before opening it
MOUNT_POLL_TIMEOUT = 120.0
