# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Nothing here is imported by the package; it exists to make the repo self-documenting.
"""

ENV_VARS = {
    # App / logging
    "TODOLIST_APP_NAME": "App display name used in logs (default: todolist).",
    "TODOLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "TODOLIST_LOG_DIR": "If set, also write full DEBUG logs to <dir>/todolist.log.",
    # Store policy
    "TODOLIST_REQUIRE_TITLE": "Store rejects blank titles (true/false, default: true).",
    "TODOLIST_STRICT_LOOKUP": (
        "Unknown task ids raise TaskNotFound instead of being ignored (true/false, default: false)."
    ),
}
