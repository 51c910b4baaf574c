# technology.py
from pydantic import BaseModel, ConfigDict, Field


class TechnologyCreate(BaseModel):
    technology: str = Field(min_length=1, max_length=50)

    model_config = ConfigDict(extra="forbid")


class TechnologyUpdate(BaseModel):
    technology: str = Field(min_length=1, max_length=50)

    model_config = ConfigDict(extra="forbid")


class TechnologyRead(BaseModel):
    id: int
    technology: str


class TechnologyResponse(BaseModel):
    technology: TechnologyRead


class TechnologyListResponse(BaseModel):
    technologies: list[TechnologyRead]
