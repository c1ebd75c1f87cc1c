"""
Shared fixtures: a fake Gemini service keyed by output model, and sample forms.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.models import (
    CareerExplorationResult,
    CareerRecommendationResult,
    CollegeAlternativesResult,
    CollegeSuggestionResult,
    CompanyAlternativesResult,
    CompanySuggestionResult,
    RoadmapResult,
    SchoolRoadmapResult,
    SkillGapResult,
    StudentProfile,
    SchoolProfile,
    LearningStyle,
)

FAKE_PCM = b"\x00\x01" * 240


def default_responses() -> dict:
    return {
        CareerRecommendationResult: {
            "careerOptions": ["Data Scientist", "ML Engineer", "Product Analyst"]
        },
        SkillGapResult: {
            "missingTechnicalSkills": ["Statistics", "SQL"],
            "missingSoftSkills": ["Storytelling"],
        },
        RoadmapResult: {
            "milestones": [
                {"month": 1, "title": "Foundations", "tasks": ["Learn statistics", "SQL basics"]},
                {"month": 2, "title": "Projects", "tasks": ["Kaggle project"]},
                {"month": 3, "title": "Portfolio", "tasks": ["Publish blog", "Mock interviews"]},
            ]
        },
        SchoolRoadmapResult: {
            "milestones": [
                {"quarter": 1, "title": "Foundation Building", "tasks": ["NCERT physics"]},
                {"quarter": 2, "title": "Mock Tests", "tasks": ["Weekly JEE mocks"]},
            ]
        },
        CareerExplorationResult: {
            "recommendations": [{"careerPath": "Data Engineer", "skills": ["Spark", "Airflow"]}]
        },
        CollegeSuggestionResult: {
            "colleges": [
                {
                    "collegeName": "IIT Bombay",
                    "location": "Mumbai, India",
                    "notableFor": "Computer Science",
                    "website": "https://www.iitb.ac.in",
                    "requiredExams": "JEE Advanced",
                    "previousYearCutoff": "Top 100 rank",
                    "costBreakdown": "INR 2.5L per year",
                    "type": "Public",
                }
            ]
        },
        CompanySuggestionResult: {
            "companies": [
                {
                    "companyName": "Infosys",
                    "industry": "IT Services",
                    "why": "Large training programme",
                    "salaryRange": "INR 4-8 LPA",
                    "hiringInsights": "Aptitude test and interviews",
                }
            ]
        },
        CollegeAlternativesResult: {
            "alternatives": [
                {
                    "name": "NIT Trichy",
                    "type": "Public",
                    "requiredExams": "JEE Main",
                    "previousYearRank": "Under 5000",
                    "costBreakdown": "INR 1.5L per year",
                    "advantages": ["Lower fees"],
                    "disadvantages": ["Smaller alumni network"],
                    "eligibilityCriteria": "75% in class 12",
                }
            ]
        },
        CompanyAlternativesResult: {
            "alternatives": [
                {
                    "name": "ISRO",
                    "sector": "Public",
                    "requiredSkills": "GATE",
                    "typicalQualifications": "B.Tech",
                    "estimatedCtc": "INR 10 LPA",
                    "advantages": ["Job security"],
                    "disadvantages": ["Slower growth"],
                    "eligibilityCriteria": "65% aggregate",
                }
            ]
        },
    }


def make_fake_gemini(overrides: dict = None):
    """
    Builds a stand-in for GeminiService. ``overrides`` maps an output model to a
    payload dict, a model instance or an exception to raise.
    """
    responses = default_responses()
    responses.update(overrides or {})

    async def generate(prompt, output_model):
        value = responses[output_model]
        if isinstance(value, Exception):
            raise value
        if isinstance(value, dict):
            return output_model.model_validate(value)
        return value

    gemini = MagicMock()
    gemini.generate = AsyncMock(side_effect=generate)
    gemini.synthesize_speech = AsyncMock(return_value=FAKE_PCM)
    return gemini


@pytest.fixture
def fake_gemini():
    return make_fake_gemini()


@pytest.fixture
def student_profile() -> StudentProfile:
    return StudentProfile(
        academic_background="B.Tech in Computer Science, final year",
        interests="data, statistics",
        skills="Python, Excel , ",
        goals="Become a data scientist at a product company",
        learning_style="Visual",
    )


@pytest.fixture
def auditory_profile(student_profile) -> StudentProfile:
    return student_profile.model_copy(update={"learning_style": LearningStyle.AUDITORY})


@pytest.fixture
def school_profile() -> SchoolProfile:
    return SchoolProfile(
        academic_background="Class 11, PCM stream, 92% in class 10",
        interests="physics, robotics",
        target="IIT Bombay",
        learning_style="Kinesthetic",
    )
