from .generate_website import GenerateWebsiteUseCase

__all__ = [
    "GenerateWebsiteUseCase",
]
