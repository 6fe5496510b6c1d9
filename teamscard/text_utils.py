from __future__ import annotations


def format_url(display: str, url: str) -> str:
    """Markdown link rendered by Teams in card text fields."""
    return f"[{display}]({url})"


def truncate(text: str | None, max_chars: int) -> str | None:
    if text is None:
        return None
    if max_chars <= 0:
        return ""
    if len(text) <= max_chars:
        return text
    # Keep the head; webhook error bodies put the reason first
    return text[: max(0, max_chars - 16)] + " ... [TRUNCATED]"
