"""
Project constants definitions
"""

# ============================================================
# Application
# ============================================================

APP_NAME = "sshc"
ENV_PREFIX = "SSHC_"

# ============================================================
# Default Paths
# ============================================================

DEFAULT_DATA_FILE = "~/.sshc/data/ssh.json"
DEFAULT_CONFIG_FILE = "~/.sshc/config.toml"

# ============================================================
# SSH Client
# ============================================================

DEFAULT_SSH_BINARY = "ssh"
SSH_CONFIG_PATH = "~/.ssh/config"

# ============================================================
# Display
# ============================================================

LABEL_HEADER = "Label"
TABLE_HEADERS = (LABEL_HEADER, "Username", "Hostname")

# ============================================================
# Exit Codes
# ============================================================

EXIT_INTERRUPTED = 130
