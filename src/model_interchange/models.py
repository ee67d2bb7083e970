from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Element(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    name: str = ""
    parent: str | None = None
    type: str = ""
    documentation: str = ""
    source: str | None = None
    target: str | None = None
    custom: dict[str, Any] = Field(default_factory=dict)


class ScopedElement(Element):
    """An element together with the branch it belongs to, as found in seed files."""

    org: str
    project: str
    branch: str

    def element(self) -> Element:
        return Element.model_validate(self.model_dump(exclude={"org", "project", "branch"}))
