# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "DAYTASKS_APP_NAME": "App display name (default: daytasks).",
    "DAYTASKS_LOG_LEVEL": "Console logging level (default: WARNING, so the REPL stays quiet; INFO or DEBUG for more).",
    # Connectors
    "DAYTASKS_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    # Paths (gitignored)
    "DAYTASKS_DATA_DIR": "Local data directory, also holds daytasks.log (default: .local/daytasks).",
    "DAYTASKS_STORAGE_DIR": "Key-value storage directory (default: <data_dir>/storage).",
    "DAYTASKS_STORAGE_KEY": "Storage key holding the whole task document (default: dailyTasks).",
    # Reminders
    "DAYTASKS_NOTIFY_ENABLED": "Run the daily reminder poller (true/false, default: true).",
    "DAYTASKS_NOTIFY_INTERVAL_SECONDS": "Poll interval in seconds (default: 60, minimum 1).",
}
