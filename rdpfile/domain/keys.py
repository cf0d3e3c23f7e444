"""
Well-known ``.rdp`` property keys.

These are convenience names only: a key is any case-sensitive string, and
neither the decoder nor the encoder treats the keys below specially. The
type table records how each setting is conventionally written so callers
can build documents that other clients will accept.
"""
from __future__ import annotations

from rdpfile.parsing.values.model import ValueType

USERNAME = "username"
FULL_ADDRESS = "full address"
DOMAIN = "domain"
SERVER_PORT = "server port"
SCREEN_MODE_ID = "screen mode id"
DESKTOP_WIDTH = "desktopwidth"
DESKTOP_HEIGHT = "desktopheight"
SESSION_BPP = "session bpp"
USE_MULTIMON = "use multimon"
AUDIO_MODE = "audiomode"
REDIRECT_CLIPBOARD = "redirectclipboard"
REDIRECT_PRINTERS = "redirectprinters"
DRIVES_TO_REDIRECT = "drivestoredirect"
AUTORECONNECTION_ENABLED = "autoreconnection enabled"
AUTHENTICATION_LEVEL = "authentication level"
PROMPT_FOR_CREDENTIALS = "prompt for credentials"
GATEWAY_HOSTNAME = "gatewayhostname"
GATEWAY_USAGE_METHOD = "gatewayusagemethod"
KDC_PROXY_NAME = "kdcproxyname"
ALTERNATE_SHELL = "alternate shell"
SHELL_WORKING_DIRECTORY = "shell working directory"
REMOTE_APPLICATION_MODE = "remoteapplicationmode"
REMOTE_APPLICATION_PROGRAM = "remoteapplicationprogram"
PASSWORD_51 = "password 51"

# Conventional value type of each well-known key.
KEY_TYPES: dict[str, ValueType] = {
    USERNAME: ValueType.STRING,
    FULL_ADDRESS: ValueType.STRING,
    DOMAIN: ValueType.STRING,
    SERVER_PORT: ValueType.INT,
    SCREEN_MODE_ID: ValueType.INT,
    DESKTOP_WIDTH: ValueType.INT,
    DESKTOP_HEIGHT: ValueType.INT,
    SESSION_BPP: ValueType.INT,
    USE_MULTIMON: ValueType.INT,
    AUDIO_MODE: ValueType.INT,
    REDIRECT_CLIPBOARD: ValueType.INT,
    REDIRECT_PRINTERS: ValueType.INT,
    DRIVES_TO_REDIRECT: ValueType.STRING,
    AUTORECONNECTION_ENABLED: ValueType.INT,
    AUTHENTICATION_LEVEL: ValueType.INT,
    PROMPT_FOR_CREDENTIALS: ValueType.INT,
    GATEWAY_HOSTNAME: ValueType.STRING,
    GATEWAY_USAGE_METHOD: ValueType.INT,
    KDC_PROXY_NAME: ValueType.STRING,
    ALTERNATE_SHELL: ValueType.STRING,
    SHELL_WORKING_DIRECTORY: ValueType.STRING,
    REMOTE_APPLICATION_MODE: ValueType.INT,
    REMOTE_APPLICATION_PROGRAM: ValueType.STRING,
    PASSWORD_51: ValueType.BINARY,
}

# Keys whose values never appear in log events.
SENSITIVE_KEYS: frozenset[str] = frozenset({PASSWORD_51, "password", "clear password"})
