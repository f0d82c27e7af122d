import os


def read_int_setting(name, default):
    """Reads an integer setting from the environment, falling back to default."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}") from None


# --- Ring Configuration ---
# Each can be overridden from the environment before the modules are imported.
DEFAULT_REPLICA_COUNT = read_int_setting("HASH_RING_REPLICAS", 256)
DEFAULT_PREFERENCE_SIZE = read_int_setting("HASH_RING_PREFERENCE_SIZE", 3) # N

LOG_LEVEL = os.environ.get("HASH_RING_LOG_LEVEL", "INFO").upper()
