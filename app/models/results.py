# app/models/results.py
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class CareerRecommendationResult(BaseModel):
    career_options: List[str] = Field(alias="careerOptions", default_factory=list)

    class Config:
        populate_by_name = True


class SkillGapResult(BaseModel):
    missing_technical_skills: List[str] = Field(
        alias="missingTechnicalSkills", default_factory=list
    )
    missing_soft_skills: List[str] = Field(alias="missingSoftSkills", default_factory=list)

    class Config:
        populate_by_name = True

    def summary(self) -> str:
        """Serializes the gaps for the roadmap prompt, e.g. ``Technical: None. Soft Skills: Teamwork.``"""
        technical = ", ".join(self.missing_technical_skills) or "None"
        soft = ", ".join(self.missing_soft_skills) or "None"
        return f"Technical: {technical}. Soft Skills: {soft}."


class RoadmapMilestone(BaseModel):
    month: int
    title: str
    tasks: List[str] = []

    @property
    def period(self) -> int:
        return self.month

    @property
    def period_label(self) -> str:
        return f"Month {self.month}"

    @property
    def short_label(self) -> str:
        return f"Month {self.month}"


class SchoolRoadmapMilestone(BaseModel):
    quarter: int
    title: str
    tasks: List[str] = []

    @property
    def period(self) -> int:
        return self.quarter

    @property
    def period_label(self) -> str:
        return f"Quarter {self.quarter}"

    @property
    def short_label(self) -> str:
        return f"Q{self.quarter}"


class RoadmapResult(BaseModel):
    milestones: List[RoadmapMilestone] = []
    audio_roadmap: Optional[str] = Field(alias="audioRoadmap", default=None)

    class Config:
        populate_by_name = True


class SchoolRoadmapResult(BaseModel):
    milestones: List[SchoolRoadmapMilestone] = []
    audio_roadmap: Optional[str] = Field(alias="audioRoadmap", default=None)

    class Config:
        populate_by_name = True


class SkillRequirement(BaseModel):
    career_path: str = Field(alias="careerPath")
    skills: List[str] = []

    class Config:
        populate_by_name = True


class CareerExplorationResult(BaseModel):
    recommendations: List[SkillRequirement] = []


class InstitutionType(str, Enum):
    PUBLIC = "Public"
    PRIVATE = "Private"


class CollegeSuggestion(BaseModel):
    college_name: str = Field(alias="collegeName")
    location: str = ""
    notable_for: str = Field(alias="notableFor", default="")
    website: str = ""
    required_exams: str = Field(alias="requiredExams", default="")
    previous_year_cutoff: str = Field(alias="previousYearCutoff", default="")
    cost_breakdown: str = Field(alias="costBreakdown", default="")
    type: InstitutionType

    class Config:
        populate_by_name = True


class CollegeSuggestionResult(BaseModel):
    colleges: List[CollegeSuggestion] = []


class CompanySuggestion(BaseModel):
    company_name: str = Field(alias="companyName")
    industry: str = ""
    why: str = ""
    salary_range: str = Field(alias="salaryRange", default="")
    hiring_insights: str = Field(alias="hiringInsights", default="")

    class Config:
        populate_by_name = True


class CompanySuggestionResult(BaseModel):
    companies: List[CompanySuggestion] = []


class CollegeAlternative(BaseModel):
    name: str
    type: InstitutionType
    required_exams: str = Field(alias="requiredExams", default="")
    previous_year_rank: str = Field(alias="previousYearRank", default="")
    cost_breakdown: str = Field(alias="costBreakdown", default="")
    advantages: List[str] = []
    disadvantages: List[str] = []
    eligibility_criteria: str = Field(alias="eligibilityCriteria", default="")

    class Config:
        populate_by_name = True


class CollegeAlternativesResult(BaseModel):
    alternatives: List[CollegeAlternative] = []


class CompanyAlternative(BaseModel):
    name: str
    sector: str = ""
    required_skills: str = Field(alias="requiredSkills", default="")
    typical_qualifications: str = Field(alias="typicalQualifications", default="")
    estimated_ctc: str = Field(alias="estimatedCtc", default="")
    advantages: List[str] = []
    disadvantages: List[str] = []
    eligibility_criteria: str = Field(alias="eligibilityCriteria", default="")

    class Config:
        populate_by_name = True


class CompanyAlternativesResult(BaseModel):
    alternatives: List[CompanyAlternative] = []
