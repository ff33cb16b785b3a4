from __future__ import annotations

import json
from typing import Any

from arraystore.store.missing import MISSING


def coerce_value(text: str) -> Any:
    lower = text.strip().lower()
    if lower in {"true", "false"}:
        return lower == "true"
    if lower in {"null", "none"}:
        return None

    if (
        (text.startswith("[") and text.endswith("]"))
        or (text.startswith("{") and text.endswith("}"))
        or (text.startswith('"') and text.endswith('"'))
    ):
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text

    if text.isdecimal() or (text.startswith("-") and text[1:].isdecimal()):
        try:
            return int(text)
        except ValueError:
            return text

    try:
        return float(text)
    except ValueError:
        return text


def format_value(value: Any) -> str:
    if value is MISSING:
        return "MISSING"
    if isinstance(value, str):
        return value

    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)
