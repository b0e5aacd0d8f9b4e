"""Shared parsing utilities for generator responses."""

import json
import re

_FENCE_RE = re.compile(r"```(?:json)?\s*\n?(.*?)\n?\s*```", re.DOTALL)


def strip_fences(text: str) -> str:
    """Strip markdown code fences from LLM output if present."""
    match = _FENCE_RE.search(text)
    return match.group(1).strip() if match else text.strip()


def response_text(response) -> str:
    """Return the text of a chat model response.

    Gemini models may return ``content`` as a list of parts instead of a
    plain string; text parts are joined in order.
    """
    content = response.content
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


def parse_json_response(response):
    """Decode a JSON payload from a chat model response.

    Raises json.JSONDecodeError if the (fence-stripped) text is not JSON.
    """
    return json.loads(strip_fences(response_text(response)))
