# src/bashpy/config.py
"""
Configuration and data structures for the bashpy scripts.
"""

import logging
import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional


ENV_PREFIX = "BASHPY_"


@dataclass
class ScriptConfig:
    """Defaults shared by the example scripts."""
    pattern: str = "ERROR"  # Substring counted by count-error
    field: str = "service.region"  # Dotted JSON path printed by read-region
    min_size: int = 1_048_576  # list-large-files threshold, strictly greater than
    default_name: str = "world"  # Used by greet when --name is absent
    timeout: float = 10.0  # Seconds for check-url

    # Debug/Verbose mode
    verbose: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ScriptConfig":
        """Build a config, overlaying any BASHPY_* environment variables."""
        if environ is None:
            environ = os.environ

        values = {}
        for f in fields(cls):
            key = ENV_PREFIX + f.name.upper()
            if key not in environ:
                continue
            raw = environ[key]
            if f.type in (bool, "bool"):
                values[f.name] = raw.strip().lower() in ("1", "true", "yes", "on")
            elif f.type in (int, "int"):
                values[f.name] = _parse_number(key, raw, int)
            elif f.type in (float, "float"):
                values[f.name] = _parse_number(key, raw, float)
            else:
                values[f.name] = raw
        return cls(**values)


def _parse_number(key, raw, kind):
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f"{key}: expected {kind.__name__}, got {raw!r}") from None


def configure_logging(verbose: bool = False):
    """Send package logs to stderr at INFO when verbose, WARNING otherwise."""
    logger = logging.getLogger("bashpy")
    # Bind to whatever sys.stderr is now, each script run gets a fresh handler.
    for old in list(logger.handlers):
        logger.removeHandler(old)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    return logger
