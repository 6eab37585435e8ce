from .upload_asset import UploadAssetUseCase
from .delete_asset import DeleteAssetUseCase
from .list_assets import ListAssetsUseCase

__all__ = [
    "UploadAssetUseCase",
    "DeleteAssetUseCase",
    "ListAssetsUseCase",
]
