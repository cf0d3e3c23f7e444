"""
This package contains the codec for ``.rdp`` remote-session settings files.

Sub-packages:

- ``values``: The typed value model and per-type parse/format rules.
- ``document``: Whole-document decoding (bytes or text) and encoding.
"""
