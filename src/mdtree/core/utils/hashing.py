"""SHA-256 content hashing for converted document fingerprints"""

import hashlib


def sha256(content: str | bytes) -> str:
    """Return the hex SHA-256 digest of content; str is encoded as UTF-8 first."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    return hashlib.sha256(content).hexdigest()
