"""Counter Schemas — Pydantic response envelopes for the counter API.

Invariants:
    - Every success body carries success=True
    - JSON field names are camelCase at the top level (viewers are a JS frontend)
      while listing rows keep their column names (project_name, click_count)
"""

from pydantic import BaseModel, ConfigDict, Field


class _Envelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True


class ViewCountResponse(_Envelope):
    count: int


class VisitLoggedResponse(_Envelope):
    message: str = "Visit logged"


class ProjectClickResponse(_Envelope):
    project_name: str = Field(alias="projectName")
    click_count: int = Field(alias="clickCount")


class ProjectClickRow(BaseModel):
    project_name: str
    click_count: int


class ProjectClicksResponse(_Envelope):
    project_clicks: list[ProjectClickRow] = Field(alias="projectClicks")


class TabVisitResponse(_Envelope):
    tab_name: str = Field(alias="tabName")
    visit_count: int = Field(alias="visitCount")


class TabVisitRow(BaseModel):
    tab_name: str
    visit_count: int


class TabVisitsResponse(_Envelope):
    tab_visits: list[TabVisitRow] = Field(alias="tabVisits")


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
