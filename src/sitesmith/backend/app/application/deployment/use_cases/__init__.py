from .publish_version import PublishVersionUseCase

__all__ = [
    "PublishVersionUseCase",
]
