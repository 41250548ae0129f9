"""Data types for the Bing image archive API response."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _get(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if kind is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    else:
        ok = isinstance(value, kind)
    if not ok:
        raise ValueError(f"field {key!r}: expected {kind.__name__}, got {type(value).__name__}")
    return value


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected an object, got {type(data).__name__}")
    return data


@dataclass
class ImageData:
    """Metadata of one daily wallpaper."""

    startdate: str = ""
    fullstartdate: str = ""
    enddate: str = ""
    url: str = ""
    urlbase: str = ""
    copyright: str = ""
    copyrightlink: str = ""
    title: str = ""
    quiz: str = ""
    wp: bool = False
    hsh: str = ""
    drk: int = 0
    top: int = 0
    bot: int = 0
    hs: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ImageData":
        """Build from a decoded JSON object; missing or null fields take their defaults."""
        data = _require_mapping(data, "image")
        hs = _get(data, "hs", list, [])
        if not all(isinstance(item, str) for item in hs):
            raise ValueError("field 'hs': expected a list of strings")
        return cls(
            startdate=_get(data, "startdate", str, ""),
            fullstartdate=_get(data, "fullstartdate", str, ""),
            enddate=_get(data, "enddate", str, ""),
            url=_get(data, "url", str, ""),
            urlbase=_get(data, "urlbase", str, ""),
            copyright=_get(data, "copyright", str, ""),
            copyrightlink=_get(data, "copyrightlink", str, ""),
            title=_get(data, "title", str, ""),
            quiz=_get(data, "quiz", str, ""),
            wp=_get(data, "wp", bool, False),
            hsh=_get(data, "hsh", str, ""),
            drk=_get(data, "drk", int, 0),
            top=_get(data, "top", int, 0),
            bot=_get(data, "bot", int, 0),
            hs=list(hs),
        )


@dataclass
class Tooltips:
    """UI hint strings returned alongside the images."""

    loading: str = ""
    previous: str = ""
    next: str = ""
    walle: str = ""
    walls: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Tooltips":
        data = _require_mapping(data, "tooltips")
        return cls(
            loading=_get(data, "loading", str, ""),
            previous=_get(data, "previous", str, ""),
            next=_get(data, "next", str, ""),
            walle=_get(data, "walle", str, ""),
            walls=_get(data, "walls", str, ""),
        )


@dataclass
class ArchiveResponse:
    """The whole image archive response."""

    images: list[ImageData] = field(default_factory=list)
    tooltips: Tooltips = field(default_factory=Tooltips)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ArchiveResponse":
        data = _require_mapping(data, "response")
        images = _get(data, "images", list, [])
        tooltips = data.get("tooltips")
        return cls(
            images=[ImageData.from_dict(item) for item in images],
            tooltips=Tooltips() if tooltips is None else Tooltips.from_dict(tooltips),
        )