from __future__ import annotations
import json
import logging
import pathlib
from typing import Any, Dict

import tomli

logger = logging.getLogger(__name__)


def parse_toml(text: str) -> Dict[str, Any]:
    return tomli.loads(text)

def parse_json(text: str) -> Any:
    return json.loads(text)


PARSERS = {
    ".toml": parse_toml,
    ".json": parse_json,
}


def load_document(path: str | pathlib.Path) -> Any:
    """Read a data, schema or error-override document into plain Python values."""
    path = pathlib.Path(path)
    parser = PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ValueError(f"Unsupported document type '{path.suffix}' for {path}. Expected one of {sorted(PARSERS)}")
    logger.debug("Loading %s as %s", path, path.suffix.lower().lstrip("."))
    return parser(path.read_text(encoding="utf-8"))
