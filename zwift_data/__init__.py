"""Zwift game state from files on disk.

The main entrypoint is `zwift_data.ZwiftData`.
"""

from .zwift_data import ZwiftData, ZwiftState

__all__ = ["ZwiftData", "ZwiftState"]
