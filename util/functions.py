# util/functions.py
from typing import Dict
from util.constants import BEARER_PREFIX, RESERVED_SUFFIX
from util.errors import InvalidArgument


def strip_bearer(token: str) -> str:
    """Drop one leading "Bearer " if present; bare tokens pass through."""
    return token.removeprefix(BEARER_PREFIX)


def parse_token_bindings(raw: str) -> Dict[str, str]:
    """
    Parse "token1:ns1,token2:ns2" into {token: namespace}.
    - Whitespace around pairs and parts is trimmed.
    - Pairs without exactly one ':' or with an empty side are skipped.
    """
    out: Dict[str, str] = {}
    if not raw:
        return out
    for pair in raw.split(","):
        parts = pair.strip().split(":")
        if len(parts) != 2:
            continue
        token, namespace = parts[0].strip(), parts[1].strip()
        if token and namespace:
            out[token] = namespace
    return out


def check_segment(value: str, field: str) -> str:
    # Namespaces and names are single path segments for every backend.
    if not value:
        raise InvalidArgument(f"{field} cannot be empty")
    if value in (".", "..") or any(c in value for c in ("/", "\\", "\x00")):
        raise InvalidArgument(f"{field} must be a single path segment")
    if value.endswith(RESERVED_SUFFIX):
        raise InvalidArgument(f"{field} cannot end with {RESERVED_SUFFIX}")
    return value
