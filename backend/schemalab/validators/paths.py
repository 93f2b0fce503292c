"""Error path construction: `$`, `$.address.zip`, `$.tags[2]`, `$["odd key"]`."""

import json
import re

ROOT = "$"

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_\-]*$")


def child_key(path: str, key: str) -> str:
    """Path of an object member. Keys that are not plain identifiers are bracket-quoted."""
    if _IDENTIFIER.match(key):
        return f"{path}.{key}"
    return f"{path}[{json.dumps(key, ensure_ascii=False)}]"


def child_index(path: str, index: int) -> str:
    return f"{path}[{index}]"
