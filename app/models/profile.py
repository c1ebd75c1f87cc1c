# app/models/profile.py
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from app.utils import split_comma_list


class LearningStyle(str, Enum):
    VISUAL = "Visual"
    AUDITORY = "Auditory"
    READING_WRITING = "Reading/Writing"
    KINESTHETIC = "Kinesthetic"


class StudentProfile(BaseModel):
    """Profile form for the college-student career track."""

    academic_background: str = Field(
        alias="academicBackground", min_length=10, description="Please provide more details."
    )
    interests: str = Field(min_length=3, description="Please list at least one interest.")
    skills: str = Field(min_length=3, description="Please list at least one skill.")
    goals: str = Field(min_length=10, description="Please describe your career goals.")
    learning_style: LearningStyle = Field(
        alias="learningStyle", default=LearningStyle.VISUAL
    )

    class Config:
        populate_by_name = True

    def skill_list(self) -> List[str]:
        return split_comma_list(self.skills)

    def summary(self) -> str:
        # Skills travel separately as currentSkills
        return (
            f"Academic Background: {self.academic_background}, "
            f"Interests: {self.interests}, Goals: {self.goals}"
        )


class ExplorerForm(BaseModel):
    interests: str = Field(min_length=3, description="Please enter at least one interest.")
    skills: str = Field(min_length=3, description="Please enter at least one skill.")
    goals: Optional[str] = None
    academic_background: Optional[str] = Field(alias="academicBackground", default=None)

    class Config:
        populate_by_name = True


class SchoolProfile(BaseModel):
    """Profile form for the school-student (college entrance) track."""

    academic_background: str = Field(alias="academicBackground", min_length=10)
    interests: str = Field(min_length=3)
    target: str = Field(min_length=3, description="e.g. IIT, AIIMS, Ivy League")
    learning_style: LearningStyle = Field(
        alias="learningStyle", default=LearningStyle.VISUAL
    )

    class Config:
        populate_by_name = True

    def summary(self) -> str:
        return (
            f"Academic Background: {self.academic_background}, "
            f"Interests: {self.interests}, Target Colleges/Courses: {self.target}"
        )


class CollegeSuggesterForm(BaseModel):
    course: str = Field(min_length=3, description="Please enter a course.")
    degree_level: str = Field(
        alias="degreeLevel", min_length=3, description="Please enter your target degree level."
    )
    interests: str = Field(min_length=3, description="Please enter at least one interest.")
    preferences: Optional[str] = None

    class Config:
        populate_by_name = True


class CompanySuggesterForm(BaseModel):
    career_path: str = Field(
        alias="careerPath", min_length=3, description="Please enter a career path."
    )

    class Config:
        populate_by_name = True


class CompanyAlternativesForm(BaseModel):
    student_profile: str = Field(alias="studentProfile", min_length=10)
    career_goal: str = Field(alias="careerGoal", min_length=3)

    class Config:
        populate_by_name = True


class CareerSelection(BaseModel):
    career: str = Field(min_length=1)
