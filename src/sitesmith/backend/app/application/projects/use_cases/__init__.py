# sitesmith/backend/app/application/projects/use_cases/__init__.py
from .create_project import CreateProjectUseCase
from .get_project import GetProjectUseCase
from .list_projects import ListProjectsUseCase
from .delete_project import DeleteProjectUseCase
from .replace_conversation import ReplaceConversationUseCase

__all__ = [
    "CreateProjectUseCase",
    "GetProjectUseCase",
    "ListProjectsUseCase",
    "DeleteProjectUseCase",
    "ReplaceConversationUseCase",
]
