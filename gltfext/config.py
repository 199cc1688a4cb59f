"""Global configuration: constants, JSON rendering settings, decode policy."""

import os

# Text encoding of every JSON fragment produced or consumed
ENCODING = "utf-8"

# Compact separators; default elision matches literals rendered with these
JSON_SEPARATORS = (",", ":")

# Host adapter policy when a registered decoder rejects a fragment.
# False keeps the raw JSON and logs a warning, True raises.
STRICT_DECODING_ENV = "GLTFEXT_STRICT"
DEFAULT_STRICT_DECODING = False


def strict_decoding() -> bool:
    """Return the decode policy, honouring ``GLTFEXT_STRICT`` when set."""
    value = os.environ.get(STRICT_DECODING_ENV)
    if value is None:
        return DEFAULT_STRICT_DECODING
    return value.strip().lower() in ("1", "true", "yes", "on")
