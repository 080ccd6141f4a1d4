from pathlib import Path

ROOT_DIR = str(Path.home() / ".local" / "share" / "git-dir-cache")
CLONE_MODE = "bare"
HEARTBEAT_INTERVAL = 1.0
LOCK_EXPIRY = 10.0
POLL_INTERVAL = 0.2

DEFAULT_SUBCOMMAND = "ensure"
