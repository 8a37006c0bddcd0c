# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Connectors
    "TASKLIST_CONSOLE_ENABLED": "Enable the console REPL (true/false, default: true).",
    "TASKLIST_HTTP_ENABLED": "Enable the HTTP API in a background thread (true/false, default: false).",
    "TASKLIST_HTTP_HOST": "HTTP bind host (default: 127.0.0.1).",
    "TASKLIST_HTTP_PORT": "HTTP bind port (default: 8080).",
    # Store policy
    "TASKLIST_ALLOW_PROJECT_OVERWRITE": (
        "Re-adding an existing project replaces it with an empty one instead of failing "
        "(true/false, default: false)."
    ),
    # Paths (gitignored)
    "TASKLIST_DATA_DIR": "Local data directory, holds tasklist.log (default: .local/tasklist).",
}
