"""
Domain vocabulary for ``.rdp`` documents: well-known property keys and
their conventional value types.
"""
from rdpfile.domain.keys import FULL_ADDRESS, KEY_TYPES, PASSWORD_51, SENSITIVE_KEYS, USERNAME

__all__ = ["FULL_ADDRESS", "KEY_TYPES", "PASSWORD_51", "SENSITIVE_KEYS", "USERNAME"]
