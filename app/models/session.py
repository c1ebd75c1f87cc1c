# app/models/session.py
from typing import List, Optional
import datetime

from pydantic import BaseModel, Field

from app.models.profile import StudentProfile
from app.models.results import (
    CareerRecommendationResult,
    CollegeAlternativesResult,
    RoadmapResult,
    SchoolRoadmapResult,
    SkillGapResult,
)


class Notification(BaseModel):
    """A toast shown to the user after a failed step."""

    variant: str = "destructive"
    title: str = "Error"
    description: str
    created_at: datetime.datetime = Field(
        alias="createdAt",
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc),
    )

    class Config:
        populate_by_name = True


class CareerSessionView(BaseModel):
    session_id: str = Field(alias="sessionId")
    profile: Optional[StudentProfile] = None
    recommendations: Optional[CareerRecommendationResult] = None
    selected_career: Optional[str] = Field(alias="selectedCareer", default=None)
    skill_gaps: Optional[SkillGapResult] = Field(alias="skillGaps", default=None)
    roadmap: Optional[RoadmapResult] = None
    pending: List[str] = []
    narration: str = "idle"
    notifications: List[Notification] = []

    class Config:
        populate_by_name = True


class SchoolTrackResult(BaseModel):
    roadmap: Optional[SchoolRoadmapResult] = None
    alternatives: Optional[CollegeAlternativesResult] = None
    notifications: List[Notification] = []
