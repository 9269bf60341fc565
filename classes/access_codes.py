"""
Access codes students type in to join a class session.

Codes are six characters drawn uniformly from the case-sensitive
alphanumeric alphabet, which gives 62**6 (about 5.7e10) combinations.
"""
from django.utils.crypto import get_random_string

ACCESS_CODE_LENGTH = 6
ACCESS_CODE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


def generate_access_code() -> str:
    return get_random_string(ACCESS_CODE_LENGTH, allowed_chars=ACCESS_CODE_CHARS)


def looks_like_access_code(value: str) -> bool:
    """True if ``value`` has the shape of a generated code."""
    return len(value) == ACCESS_CODE_LENGTH and all(ch in ACCESS_CODE_CHARS for ch in value)
