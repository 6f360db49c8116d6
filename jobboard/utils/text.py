"""Plain-text helpers for turning free-form applicant input into lists."""


def split_skills(text: str | None) -> list[str]:
    """
    Split a comma-separated skills string.

    Pieces are trimmed and empty ones dropped. Order and duplicates are kept.
    """
    if not text:
        return []
    return [s.strip() for s in text.split(",") if s.strip()]


def non_blank_lines(text: str | None, limit: int | None = None) -> list[str]:
    """Return the lines of `text` that are not blank, in order, optionally capped at `limit`."""
    if not text:
        return []
    lines = [line for line in text.split("\n") if line.strip()]
    return lines if limit is None else lines[:limit]


def truncate(text: str | None, max_chars: int) -> str:
    """Cut `text` to at most `max_chars` characters."""
    return (text or "")[:max_chars]
