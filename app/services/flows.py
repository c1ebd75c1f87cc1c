"""
One coroutine per capability. Each builds its prompt, asks Gemini for the
matching output model and returns the typed result; any failure surfaces as
``GenerationError``. Input validation belongs to the forms in ``app.models``.
"""
import logging
from typing import List, Optional, Sequence

from app.config import settings
from app.models import (
    CareerExplorationResult,
    CareerRecommendationResult,
    CollegeAlternativesResult,
    CollegeSuggestionResult,
    CompanyAlternativesResult,
    CompanySuggestionResult,
    LearningStyle,
    RoadmapResult,
    SchoolRoadmapResult,
    SkillGapResult,
)
from app.services.audio import pcm_to_wav_data_url
from app.services.career_prompt import (
    build_exploration_prompt,
    build_recommendation_prompt,
    build_skill_gap_prompt,
)
from app.services.roadmap_prompt import (
    build_narration_prompt,
    build_roadmap_prompt,
    build_school_roadmap_prompt,
)
from app.services.suggestion_prompt import (
    build_college_alternatives_prompt,
    build_college_suggestion_prompt,
    build_company_alternatives_prompt,
    build_company_suggestion_prompt,
)
from app.utils import or_not_specified

logger = logging.getLogger(__name__)


async def recommend_career_paths(
    gemini, academic_background: str, interests: str, skills: str, goals: str
) -> CareerRecommendationResult:
    prompt = build_recommendation_prompt(academic_background, interests, skills, goals)
    return await gemini.generate(prompt, CareerRecommendationResult)


async def analyze_skill_gaps(gemini, career_path: str, student_skills: List[str]) -> SkillGapResult:
    prompt = build_skill_gap_prompt(career_path, student_skills)
    return await gemini.generate(prompt, SkillGapResult)


async def narrate_milestones(
    gemini, milestones: Sequence, audience: str = "career coach"
) -> Optional[str]:
    """
    Speaks a summary of the milestones and returns it as a WAV data URL, or
    ``None`` when the speech reply had no audio in it.
    """
    pcm = await gemini.synthesize_speech(build_narration_prompt(milestones, audience))
    if not pcm:
        return None
    return pcm_to_wav_data_url(
        pcm,
        channels=settings.audio_channels,
        rate=settings.audio_sample_rate,
        sample_width=settings.audio_sample_width,
    )


async def generate_roadmap(
    gemini,
    student_profile: str,
    career_path: str,
    current_skills: str,
    skill_gaps: str,
    learning_style: LearningStyle,
) -> RoadmapResult:
    prompt = build_roadmap_prompt(
        student_profile, career_path, current_skills, skill_gaps, learning_style
    )
    roadmap = await gemini.generate(prompt, RoadmapResult)

    if learning_style == LearningStyle.AUDITORY:
        logger.info("🔊 Narrating %d milestones for auditory learner", len(roadmap.milestones))
        roadmap.audio_roadmap = await narrate_milestones(gemini, roadmap.milestones)
    return roadmap


async def generate_school_roadmap(
    gemini, student_profile: str, learning_style: LearningStyle
) -> SchoolRoadmapResult:
    prompt = build_school_roadmap_prompt(student_profile, learning_style)
    roadmap = await gemini.generate(prompt, SchoolRoadmapResult)

    if learning_style == LearningStyle.AUDITORY:
        logger.info("🔊 Narrating %d quarters for auditory learner", len(roadmap.milestones))
        roadmap.audio_roadmap = await narrate_milestones(
            gemini, roadmap.milestones, audience="academic advisor"
        )
    return roadmap


async def explore_career_paths(
    gemini,
    interests: str,
    skills: str,
    goals: Optional[str] = None,
    academic_background: Optional[str] = None,
) -> CareerExplorationResult:
    prompt = build_exploration_prompt(
        interests, skills, or_not_specified(goals), or_not_specified(academic_background)
    )
    return await gemini.generate(prompt, CareerExplorationResult)


async def suggest_colleges(
    gemini, course: str, degree_level: str, interests: str, preferences: Optional[str] = None
) -> CollegeSuggestionResult:
    prompt = build_college_suggestion_prompt(course, degree_level, interests, preferences)
    return await gemini.generate(prompt, CollegeSuggestionResult)


async def suggest_companies(gemini, career_path: str) -> CompanySuggestionResult:
    return await gemini.generate(build_company_suggestion_prompt(career_path), CompanySuggestionResult)


async def suggest_college_alternatives(gemini, student_profile: str) -> CollegeAlternativesResult:
    prompt = build_college_alternatives_prompt(student_profile)
    return await gemini.generate(prompt, CollegeAlternativesResult)


async def suggest_company_alternatives(
    gemini, student_profile: str, career_goal: str
) -> CompanyAlternativesResult:
    prompt = build_company_alternatives_prompt(student_profile, career_goal)
    return await gemini.generate(prompt, CompanyAlternativesResult)
