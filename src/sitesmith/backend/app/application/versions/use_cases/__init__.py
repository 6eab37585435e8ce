from .append_version import AppendVersionUseCase
from .edit_version_in_place import EditVersionInPlaceUseCase
from .get_version import GetCurrentVersionUseCase, GetVersionUseCase
from .navigate_versions import NavigateVersionsUseCase

__all__ = [
    "AppendVersionUseCase",
    "EditVersionInPlaceUseCase",
    "GetCurrentVersionUseCase",
    "GetVersionUseCase",
    "NavigateVersionsUseCase",
]
