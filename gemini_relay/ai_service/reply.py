"""
Reply extraction from Gemini results.
"""

from typing import Any

FALLBACK_REPLY = "No answer available"


def extract_reply(result: Any) -> str:
    """
    Join the text of the first candidate's parts into a single reply.

    Every level of the result (candidates, content, parts, text) may be
    missing. Parts without text count as empty strings.

    Args:
        result: A GenerateContentResponse, or anything shaped like one.

    Returns:
        str: The trimmed reply, or FALLBACK_REPLY if nothing usable is present.
    """
    candidates = getattr(result, "candidates", None)
    if not candidates:
        return FALLBACK_REPLY

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None)
    if not parts:
        return FALLBACK_REPLY

    texts = []
    for part in parts:
        text = getattr(part, "text", None)
        texts.append(text if isinstance(text, str) else "")

    return " ".join(texts).strip() or FALLBACK_REPLY
