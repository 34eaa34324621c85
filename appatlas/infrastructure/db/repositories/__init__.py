from .applications import ApplicationNotFoundError, ApplicationRepository
from .environments import EnvironmentRepository
from .workloads import WorkloadRepository

__all__ = [
    "ApplicationNotFoundError",
    "ApplicationRepository",
    "EnvironmentRepository",
    "WorkloadRepository",
]
