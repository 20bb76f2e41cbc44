"""
Version Checker - Platform Model

Contains the Platform enum identifying the app store a version check
is made for.

Author: Version Checker Project
"""

from enum import Enum


class Platform(str, Enum):
    """
    Enum of supported mobile platforms.

    Values are the lowercase names sent over the wire.
    """
    IOS = "ios"
    ANDROID = "android"
