"""Project entity.

Projects are owned by the client data store. Older stored shapes may lack
any field but ``id``, so everything else defaults to empty.
"""

from datetime import datetime

from pydantic import Field

from ideamarket.domain.model.common import DomainModel
from ideamarket.domain.value import ProjectId, ProjectStatus


class ProjectHistoryEntry(DomainModel):
    """One append-only entry of a project's review history."""

    at: datetime
    by: str
    action: str
    note: str = ""


class Project(DomainModel):
    """A buyer's project idea."""

    id: ProjectId
    title: str = ""
    description: str = ""
    category: str = ""
    skills: list[str] = Field(default_factory=list)
    budget: str | float | None = None
    deadline: str | None = None
    created_at: datetime | None = None
    status: ProjectStatus = ProjectStatus.PENDING
    history: list[ProjectHistoryEntry] = Field(default_factory=list)
