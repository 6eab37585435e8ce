from sitesmith.backend.app.domain.common.errors import (
    DeploymentFailed,
    NotFound,
    PersistenceFailed,
    UpstreamUnavailable,
    ValidationError,
)


class ProjectNotFound(NotFound):
    def __init__(self, project_id: str):
        super().__init__(f"Project with id {project_id} not found.")


class VersionNotFound(NotFound):
    def __init__(self, version_id: str):
        super().__init__(f"HTML version with id {version_id} not found.")


class AssetNotFound(NotFound):
    def __init__(self, asset_id: str):
        super().__init__(f"Asset with id {asset_id} not found.")


class InvalidVersionIndex(ValidationError):
    def __init__(self, index: int, count: int):
        super().__init__(
            f"Invalid version index {index}: project has {count} version(s)."
        )


class ProjectHasNoDomain(ValidationError):
    def __init__(self, project_id: str):
        super().__init__(f"Project {project_id} does not have a domain.")


class ImmutableProjectField(ValidationError):
    def __init__(self, field_name: str):
        super().__init__(f"Project field '{field_name}' cannot be changed.")


class UnsupportedMediaType(ValidationError):
    def __init__(self, content_type: str):
        super().__init__(
            f"Unsupported content type '{content_type}'. "
            "Only PNG, JPEG, GIF, and WebP images are allowed."
        )


class InvalidImage(ValidationError):
    def __init__(self, filename: str):
        super().__init__(f"Failed to read image metadata for '{filename}'.")


class FailedToDeployVersion(DeploymentFailed):
    def __init__(self, domain: str, index: int):
        super().__init__(f"Failed to deploy version {index} to {domain}.")


class DomainRegistrationFailed(UpstreamUnavailable):
    def __init__(self, hostname: str):
        super().__init__(f"Failed to register domain {hostname}.")


class FailedToUploadAsset(UpstreamUnavailable):
    def __init__(self, filename: str):
        super().__init__(f"Failed to upload asset '{filename}'.")


class FailedToDeleteAsset(UpstreamUnavailable):
    def __init__(self, filename: str):
        super().__init__(f"Failed to delete asset '{filename}' from storage.")


class GenerationFailed(UpstreamUnavailable):
    def __init__(self, reason: str):
        super().__init__(f"Failed to generate website: {reason}")


class FailedToPersistProjects(PersistenceFailed):
    def __init__(self, path: str):
        super().__init__(f"Failed to persist project store to {path}.")
