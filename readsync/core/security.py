"""Password digests for stored credentials: base64(HMAC-SHA256(key=salt, message=password))."""
import base64
import hashlib
import hmac
import secrets
import string

SALT_ALPHABET = string.ascii_lowercase + string.digits
DEFAULT_SALT_LENGTH = 8


def generate_salt(length: int = DEFAULT_SALT_LENGTH) -> str:
    """Random lowercase-alphanumeric salt."""
    return "".join(secrets.choice(SALT_ALPHABET) for _ in range(length))


def password_digest(password: str, salt: str) -> str:
    mac = hmac.new(salt.encode("utf-8"), password.encode("utf-8"), hashlib.sha256)
    return base64.b64encode(mac.digest()).decode("ascii")


def verify_password(password: str, salt: str, digest: str) -> bool:
    """Constant-time check of a plaintext password against a stored digest."""
    expected = password_digest(password, salt)
    return hmac.compare_digest(expected.encode("ascii"), digest.encode("ascii"))
