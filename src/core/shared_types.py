"""
Type definitions used across layers
"""

from enum import StrEnum


class Role(StrEnum):
    PLAYER = "player"
    ADMIN = "admin"
