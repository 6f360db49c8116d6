"""Utility modules."""

from .text import non_blank_lines, split_skills, truncate

__all__ = ["non_blank_lines", "split_skills", "truncate"]
