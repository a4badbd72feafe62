# src/bashpy/jsonfield.py
"""
Read one field out of a JSON document, the Python side of
``jq -r .service.region config.json``.
"""

import json
import logging
from typing import Any, Mapping

logger = logging.getLogger(__name__)

DEFAULT_FIELD = "service.region"


def get_field(document: Any, dotted_path: str) -> Any:
    """Walk nested mappings along a ``.``-separated path."""
    value = document
    walked = []
    for key in dotted_path.split("."):
        if not isinstance(value, Mapping):
            where = ".".join(walked) or "<root>"
            raise TypeError(f"{where} is not an object, cannot read {key!r}")
        if key not in value:
            raise KeyError(".".join(walked + [key]))
        value = value[key]
        walked.append(key)
    return value


def read_field(path, dotted_path: str = DEFAULT_FIELD) -> Any:
    """Load the JSON file at ``path`` and return the field at ``dotted_path``."""
    with open(path, encoding="utf-8") as fh:
        document = json.load(fh)
    logger.info(f"Loaded {path}, reading {dotted_path}")
    return get_field(document, dotted_path)


def format_value(value: Any) -> str:
    """Strings print raw (like ``jq -r``); everything else prints as JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(value)
