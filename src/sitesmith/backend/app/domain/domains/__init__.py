from .errors import DomainRegistryError
from .interfaces import DomainRegistry
from .value_objects import generate_hostname

__all__ = [
    "DomainRegistry",
    "DomainRegistryError",
    "generate_hostname",
]
