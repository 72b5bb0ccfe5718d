"""Constants used throughout MCP Helpy Helperton."""


# Claude Code configuration (the active store)
CLAUDE_CONFIG_FILE_NAME = ".claude.json"
ACTIVE_SERVERS_KEY = "mcpServers"
BACKUP_SUFFIX = ".helperton-backup"

# Helperton storage (the disabled store)
APP_DIR_NAME = "mcp-helperton"
HELPY_CONFIG_FILE_NAME = "helpy.json"
DISABLED_SERVERS_KEY = "disabledServers"
HELPY_CONFIG_VERSION = 1

# Atomic write tuning
WRITE_MAX_RETRIES = 3
WRITE_RETRY_DELAY = 0.1  # seconds, doubled on every retry
TEMP_FILE_SUFFIX = ".tmp"

# JSON formatting for both stores
JSON_INDENT = 2

# Interactive screen
APP_TITLE = "MCP Helpy Helperton"
HELP_LINE = "↑↓ Navigate  Enter Toggle  s Save & Quit  q Quit"
