try:
    from cryptography.hazmat.primitives import hashes
except Exception as exc:  # pragma: no cover - hard fail when dependency missing
    raise ImportError(
        "cryptography is required. Install with `python3 -m pip install cryptography`."
    ) from exc

DIGEST_SIZE = hashes.SHA256.digest_size
_HEX = set("0123456789abcdef")


def sha256(data: bytes) -> str:
    h = hashes.Hash(hashes.SHA256())
    h.update(data)
    return h.finalize().hex()


def sha256_text(text: str) -> str:
    return sha256(text.encode("utf-8"))


def is_digest(value: str) -> bool:
    """True for a lowercase hex SHA-256 digest."""
    return len(value) == DIGEST_SIZE * 2 and set(value) <= _HEX
