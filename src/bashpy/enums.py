# src/bashpy/enums.py
"""
Enumeration types for the bashpy cheat-sheet.
"""

from enum import Enum


class Topic(Enum):
    """Cheat-sheet sections, in the order they appear."""
    VARIABLES = "variables"
    CONDITIONALS = "conditionals"
    LOOPS = "loops"
    ARRAYS = "arrays"
    FUNCTIONS = "functions"
    FILE_IO = "file-io"
    ARITHMETIC = "arithmetic"
    COMMAND_SUBSTITUTION = "command-substitution"
    ENVIRONMENT = "environment"
    STRINGS = "strings"
    REGEX = "regex"
    GLOB = "glob"
    JSON = "json"

    @property
    def heading(self) -> str:
        return _HEADINGS[self]


_HEADINGS = {
    Topic.VARIABLES: "Variables",
    Topic.CONDITIONALS: "Conditionals",
    Topic.LOOPS: "Loops",
    Topic.ARRAYS: "Arrays and lists",
    Topic.FUNCTIONS: "Functions",
    Topic.FILE_IO: "File I/O",
    Topic.ARITHMETIC: "Arithmetic",
    Topic.COMMAND_SUBSTITUTION: "Command substitution",
    Topic.ENVIRONMENT: "Environment variables",
    Topic.STRINGS: "Strings",
    Topic.REGEX: "Regular expressions",
    Topic.GLOB: "Globbing",
    Topic.JSON: "JSON",
}
