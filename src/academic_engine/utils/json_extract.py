"""Tolerant JSON extraction from model output."""

from __future__ import annotations

import json
import re
from typing import Any, Dict, Optional

from academic_engine.logging import get_logger

logger = get_logger(__name__)

_FENCE_JSON_RE = re.compile(r"```json\s*\n?(.*?)\n?```", re.DOTALL | re.IGNORECASE)
_FENCE_ANY_RE = re.compile(r"```\s*\n?(.*?)\n?```", re.DOTALL)


def extract_json_object(text: str) -> Optional[Dict[str, Any]]:
    """Pull one JSON object out of a model reply.

    Strategies, strictest first:
        1. A ```json fenced block (or any fenced block) holding an object.
        2. The whole reply, when it starts with ``{`` and ends with ``}``.
        3. The span from the first ``{`` to the last ``}``.

    Returns None instead of raising when nothing parses.
    """

    if not text:
        return None

    cleaned = text.strip()

    m = _FENCE_JSON_RE.search(cleaned) or _FENCE_ANY_RE.search(cleaned)
    if m:
        inner = m.group(1).strip()
        if inner.startswith("{") and inner.endswith("}"):
            try:
                return json.loads(inner)
            except json.JSONDecodeError:
                logger.debug("extract_json_object: fenced JSON parse failed")

    if cleaned.startswith("{") and cleaned.endswith("}"):
        try:
            return json.loads(cleaned)
        except json.JSONDecodeError:
            logger.debug("extract_json_object: whole-text JSON parse failed")

    start, end = cleaned.find("{"), cleaned.rfind("}")
    if 0 <= start < end:
        try:
            obj = json.loads(cleaned[start : end + 1])
        except json.JSONDecodeError:
            logger.debug("extract_json_object: brace-span JSON parse failed")
        else:
            if isinstance(obj, dict):
                return obj

    return None
