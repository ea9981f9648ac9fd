from .base_container import BaseContainer
from .container import DIContainer, build_use_case_container

__all__ = [
    "BaseContainer",
    "DIContainer",
    "build_use_case_container",
]
