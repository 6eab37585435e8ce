from .entities import Asset, HtmlVersion, Project
from .value_objects import ImageGeometry, SiteLayout, SortOrder, VersionCursor
from .repositories import ProjectRepository

__all__ = [
    "Asset",
    "HtmlVersion",
    "Project",
    "ImageGeometry",
    "SiteLayout",
    "SortOrder",
    "VersionCursor",
    "ProjectRepository",
]
