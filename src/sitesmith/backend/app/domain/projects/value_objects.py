# sitesmith/backend/app/domain/projects/value_objects.py
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from math import gcd


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class Orientation(StrEnum):
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    SQUARE = "square"


class NavigationDirection(StrEnum):
    PREVIOUS = "previous"
    NEXT = "next"


@dataclass(frozen=True)
class ImageGeometry:
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Image dimensions must be positive.")

    @property
    def aspect_ratio(self) -> str:
        divisor = gcd(self.width, self.height)
        return f"{self.width // divisor}:{self.height // divisor}"

    @property
    def orientation(self) -> Orientation:
        if self.width > self.height:
            return Orientation.LANDSCAPE
        if self.width < self.height:
            return Orientation.PORTRAIT
        return Orientation.SQUARE

    def describe(self, caption: str) -> str:
        return f"{caption}\nAspect Ratio: {self.aspect_ratio} ({self.orientation})"


@dataclass(frozen=True)
class VersionCursor:
    """
    Position inside a project's version list.
    Moving past either end saturates; there is no wraparound.
    """
    index: int
    count: int

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError("Cannot navigate a project without versions.")
        if not 0 <= self.index < self.count:
            raise ValueError(f"Index {self.index} is outside 0..{self.count - 1}.")

    def previous(self) -> VersionCursor:
        return VersionCursor(index=max(0, self.index - 1), count=self.count)

    def next(self) -> VersionCursor:
        return VersionCursor(index=min(self.count - 1, self.index + 1), count=self.count)

    def move(self, direction: NavigationDirection) -> VersionCursor:
        if direction == NavigationDirection.PREVIOUS:
            return self.previous()
        return self.next()


@dataclass(frozen=True)
class SiteLayout:
    """
    Object-store keys and public URLs for a project's site.
    Every published version of a project lives at the same index key.
    """
    prefix: str = "website"

    def site_prefix(self, domain: str) -> str:
        return f"{self.prefix}/{domain}/"

    def index_key(self, domain: str) -> str:
        return f"{self.site_prefix(domain)}index.html"

    def asset_key(self, domain: str, filename: str) -> str:
        return f"{self.site_prefix(domain)}assets/{filename}"

    @staticmethod
    def site_url(domain: str) -> str:
        return f"https://{domain}"

    @staticmethod
    def asset_url(domain: str, filename: str) -> str:
        return f"https://{domain}/assets/{filename}"


_LEADING_FENCE = re.compile(r"^\s*```[A-Za-z0-9_-]*[ \t]*\r?\n?")
_TRAILING_FENCE = re.compile(r"\r?\n?[ \t]*```\s*$")


def strip_code_fences(document: str) -> str:
    # generators sometimes wrap the page in ```html ... ```
    text = _LEADING_FENCE.sub("", document, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()
