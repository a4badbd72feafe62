# src/bashpy/__init__.py
"""
bashpy: Bash idioms and their Python equivalents
A cheat-sheet plus the small scripts it uses as worked examples
"""

__version__ = "0.1.0"

from .enums import Topic
from .config import ScriptConfig
from .cheatsheet import Idiom, IDIOMS, idioms_for, render_markdown
from .counting import count_matching_lines, count_in_file
from .jsonfield import get_field, read_field
from .largefiles import FileEntry, find_large_files, format_bytes
from .greeting import greeting
from .urlcheck import UrlCheckResult, check_url

__all__ = [
    "Topic",
    "ScriptConfig",
    "Idiom",
    "IDIOMS",
    "idioms_for",
    "render_markdown",
    "count_matching_lines",
    "count_in_file",
    "get_field",
    "read_field",
    "FileEntry",
    "find_large_files",
    "format_bytes",
    "greeting",
    "UrlCheckResult",
    "check_url",
]
