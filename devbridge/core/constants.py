"""
Project constants definitions
"""

# ============================================================
# Remote Shell Commands
# ============================================================

# Paths and patterns are inserted verbatim so the device shell can glob them
STAT_COMMAND = "stat {path}"
CHMOD_COMMAND = "chmod {mode} {path}"
LIST_COMMAND = "ls -1 -c {pattern}"

# ============================================================
# Output Markers
# ============================================================

STAT_MISSING_MARKER = "No such file or directory"
# `ls` diagnostics arrive on stdout through the bridge pty
LS_DIAGNOSTIC_PREFIX = "ls: "
LS_MISSING_MARKER = "No such file or directory"
PUSH_FAILURE_MARKERS = (
    "failed to copy",
    "cannot stat",
)

# ============================================================
# File Spec Filters
# ============================================================

FILTER_LATEST = "latest"

# ============================================================
# Default Values
# ============================================================

DEFAULT_TRANSPORT = "sdb"
DEFAULT_SDB_EXECUTABLE = "sdb"
DEFAULT_SSH_PORT = 22
DEFAULT_SSH_TIMEOUT = 10
DEFAULT_OVERWRITE = False

# ============================================================
# Configuration
# ============================================================

ENV_PREFIX = "DEVBRIDGE_"
DEFAULT_CONFIG_FILE = "devbridge.toml"

# ============================================================
# Bridge Diagnostics
# ============================================================

# stderr/stdout prefixes the bridge itself uses for device-level failures
BRIDGE_ERROR_PREFIXES = (
    "error:",
    "adb: error:",
    "sdb: error:",
)
