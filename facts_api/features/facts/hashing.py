"""Content hashing for the prompt cache."""

import hashlib


def hash_text(text: str) -> str:
    """Return the SHA-256 hex digest of `text`, used as the prompt cache key.

    Lone surrogates, which JSON escapes can produce, are encoded as-is so
    every string has a hash.
    """
    return hashlib.sha256(text.encode("utf-8", errors="surrogatepass")).hexdigest()
