"""Shared type aliases used across the domain."""
from __future__ import annotations

from typing import TypeAlias

Microseconds: TypeAlias = int
SourceLine: TypeAlias = int  # 1-based line number in a source file
