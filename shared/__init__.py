"""Shared fixture definitions used by both scripts and tests.

This package keeps fixture names and writers in one place so scripts/ does
not import from tests/.
"""

from __future__ import annotations
