"""Environment configuration, read once at import time."""

import os
import sys

from dotenv import load_dotenv

load_dotenv()

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    print(f"Unsupported {name}={raw!r}, falling back to {default}", file=sys.stderr)
    return default


LOG_LEVEL = os.getenv("DECISION_TREE_LOG_LEVEL", "INFO").strip().upper()
LOG_FORMAT = os.getenv("DECISION_TREE_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Leaf actions dump the context they receive; disable for large contexts
LOG_CONTEXT = _env_flag("DECISION_TREE_LOG_CONTEXT", True)

DEEP_VALIDATION = _env_flag("DECISION_TREE_DEEP_VALIDATION", False)
