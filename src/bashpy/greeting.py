# src/bashpy/greeting.py
"""
The flag-parsing example: ``greet --name=NAME``.
"""

from typing import Optional

DEFAULT_NAME = "world"


def greeting(name: Optional[str] = None, default: str = DEFAULT_NAME) -> str:
    """Build the greeting. Only a missing name falls back to the default."""
    if name is None:
        name = default
    return f"Hello, {name}"
