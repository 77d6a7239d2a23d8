"""Models for the compute engine API."""

from enum import Enum

from pydantic import Field

from sonarqube_client.models import PaginatedResponse, SonarQubeModel


class TaskStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    CANCELED = "CANCELED"


class Task(SonarQubeModel):
    """Background (compute engine) task."""

    id: str
    type: str
    status: str
    component_id: str | None = Field(default=None, alias="componentId")
    component_key: str | None = Field(default=None, alias="componentKey")
    component_name: str | None = Field(default=None, alias="componentName")
    component_qualifier: str | None = Field(default=None, alias="componentQualifier")
    analysis_id: str | None = Field(default=None, alias="analysisId")
    submitted_at: str | None = Field(default=None, alias="submittedAt")
    submitter_login: str | None = Field(default=None, alias="submitterLogin")
    started_at: str | None = Field(default=None, alias="startedAt")
    executed_at: str | None = Field(default=None, alias="executedAt")
    execution_time_ms: int | None = Field(default=None, alias="executionTimeMs")
    error_message: str | None = Field(default=None, alias="errorMessage")
    error_type: str | None = Field(default=None, alias="errorType")
    warning_count: int = Field(default=0, alias="warningCount")
    warnings: list[str] = Field(default_factory=list)
    branch: str | None = None
    branch_type: str | None = Field(default=None, alias="branchType")
    pull_request: str | None = Field(default=None, alias="pullRequest")
    organization: str | None = None

    @property
    def is_finished(self) -> bool:
        return self.status in (TaskStatus.SUCCESS, TaskStatus.FAILED, TaskStatus.CANCELED)


class ActivityResponse(PaginatedResponse):
    """Response from /api/ce/activity."""

    tasks: list[Task] = Field(default_factory=list)


class ActivityStatus(SonarQubeModel):
    """Queue counters from /api/ce/activity_status."""

    pending: int = 0
    failing: int = 0
    in_progress: int = Field(default=0, alias="inProgress")
    pending_time: int | None = Field(default=None, alias="pendingTime")


class ComponentTasks(SonarQubeModel):
    """Pending and current tasks of a component."""

    queue: list[Task] = Field(default_factory=list)
    current: Task | None = None


class TaskResponse(SonarQubeModel):
    task: Task
