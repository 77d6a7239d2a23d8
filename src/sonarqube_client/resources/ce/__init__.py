"""Compute engine API."""

from sonarqube_client.resources.ce.builders import ActivityBuilder
from sonarqube_client.resources.ce.client import CEClient
from sonarqube_client.resources.ce.models import ActivityResponse, ActivityStatus, ComponentTasks, Task, TaskStatus

__all__ = [
    "ActivityBuilder",
    "ActivityResponse",
    "ActivityStatus",
    "CEClient",
    "ComponentTasks",
    "Task",
    "TaskStatus",
]
