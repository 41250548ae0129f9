"""Helpers for formatting dates and describing wallpapers."""

from __future__ import annotations

from datetime import datetime

from .models import ImageData

_REPLACEMENTS = (
    (" ", "_"),
    ("/", "-"),
    ("\\", "-"),
    (":", "-"),
    ("?", ""),
    ("*", ""),
    ("<", ""),
    (">", ""),
    ("|", "-"),
    ('"', "'"),
)


def format_date(date_str: str) -> str:
    """Turn ``YYYYMMDD`` into a readable date; raise ValueError on bad length."""
    if len(date_str) != 8:
        raise ValueError(f"无效的日期格式: {date_str}")
    return f"{date_str[0:4]}年{date_str[4:6]}月{date_str[6:8]}日"


def format_full_datetime(full_date_str: str) -> str:
    """Turn ``YYYYMMDDHHMM...`` into a readable date and time."""
    if len(full_date_str) < 12:
        raise ValueError(f"无效的完整日期时间格式: {full_date_str}")
    s = full_date_str
    return f"{s[0:4]}年{s[4:6]}月{s[6:8]}日 {s[8:10]}:{s[10:12]}"


def image_summary(image: ImageData) -> str:
    """Short multi-line description: title, copyright and date where present."""
    lines = []
    if image.title:
        lines.append(f"标题: {image.title}")
    if image.copyright:
        lines.append(f"描述: {image.copyright}")
    if image.startdate:
        try:
            lines.append(f"日期: {format_date(image.startdate)}")
        except ValueError:
            pass
    return "\n".join(lines).strip()


def today_date_string() -> str:
    """Today's local date as ``YYYYMMDD``."""
    return datetime.now().strftime("%Y%m%d")


def is_image_from_today(image: ImageData) -> bool:
    return image.startdate == today_date_string()


def extract_wallpaper_description(image: ImageData) -> str:
    """A filename-safe description taken from the title, or else from the copyright."""
    description = image.title
    if not description:
        description = image.copyright.split("，", 1)[0]
        description = description.split("(", 1)[0]
    description = description.strip()
    for old, new in _REPLACEMENTS:
        description = description.replace(old, new)
    return description