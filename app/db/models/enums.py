"""
Enum models for various categories.

These enums are used for validating and categorizing data within request and response schemas.
"""

import enum

class PlatformEnum(str, enum.Enum):
    android = "android"
    ios = "ios"
