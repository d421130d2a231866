import bcrypt

# bcrypt only looks at the first 72 bytes of a secret
_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    """Salted one-way hash of a plaintext password"""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    """Compare a plaintext password against a stored hash"""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False
