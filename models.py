# models.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CheckSize(BaseModel):
    min: float = Field(ge=0)
    max: float = Field(ge=0)

    @model_validator(mode="after")
    def check_range(self):
        if self.min > self.max:
            raise ValueError("check_size.min must not exceed check_size.max")
        return self


class InvestorCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: Optional[str] = None
    linkedin_url: Optional[str] = None
    industries: List[str] = Field(min_length=1)
    stages: List[str] = Field(min_length=1)
    check_size: CheckSize
    geography: List[str] = Field(min_length=1)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("id", "name", "email", "linkedin_url", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("industries", "stages", "geography", mode="before")
    @classmethod
    def strip_labels(cls, v):
        if isinstance(v, list):
            return [item.strip() if isinstance(item, str) else item for item in v]
        return v

    @field_validator("industries", "stages", "geography")
    @classmethod
    def no_blank_labels(cls, v):
        if any(not item for item in v):
            raise ValueError("labels must not be blank")
        return v


class Founder(BaseModel):
    name: str
    avatar_url: Optional[str] = None


class StartupMetrics(BaseModel):
    arr: Optional[float] = None
    customers: Optional[int] = None
    growth: Optional[str] = None


class StartupProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: Optional[str] = None
    industry: str = Field(min_length=1)
    stage: str = Field(min_length=1)
    raising: float = Field(ge=0)
    geography: str = Field(min_length=1)
    description: str = ""
    website: Optional[str] = None
    metrics: StartupMetrics = StartupMetrics()
    founders: List[Founder] = []

    @field_validator("id", "name", "industry", "stage", "geography", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class ScoredStartup(BaseModel):
    startup: StartupProfile
    score: int = Field(ge=0, le=100)


class MatchInsights(BaseModel):
    """Structured output requested from the text model."""
    model_config = ConfigDict(extra="forbid")

    explanation: str = Field(
        min_length=1,
        description="One concise sentence (max 25 words) explaining why this is a strong match. "
                    "Be specific about alignment.",
    )
    outreach: str = Field(
        min_length=1,
        description="A warm, professional intro message (40-50 words) the investor can send to the "
                    "startup. Reference specific shared interests, suggest a 15-min call, and avoid "
                    "formal openings like \"Dear\".",
    )

    @field_validator("explanation", "outreach", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    profile: StartupProfile
    rank: int = Field(ge=1)
    explanation: str
    outreach: str
    internal_score: int


class MatchResponse(BaseModel):
    investor_id: str
    matches: List[MatchResult]
    generated_at: datetime
