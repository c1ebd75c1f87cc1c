"""
Session-scoped orchestration of the career track, plus the school-track
fan-out and single-call tools.

Every step is user gated: nothing chains automatically. A failed model call
is caught here exactly once, turned into a generic notification and
re-raised as ``StepFailed``; state produced by earlier steps stays intact.
"""
import asyncio
import logging
from typing import Awaitable, TypeVar

from app.models import (
    CareerRecommendationResult,
    Notification,
    RoadmapResult,
    SchoolProfile,
    SchoolTrackResult,
    SkillGapResult,
    StudentProfile,
)
from app.services import flows
from app.services.gemini_service import GenerationError
from app.services.narration import NarrationState
from app.services.session_store import CareerSession

logger = logging.getLogger(__name__)

T = TypeVar("T")

RECOMMENDATIONS = "recommendations"
SKILL_GAPS = "skillGaps"
ROADMAP = "roadmap"


class StepInProgress(Exception):
    pass


class MissingPrerequisite(Exception):
    pass


class StepFailed(Exception):
    def __init__(self, notification: Notification):
        super().__init__(notification.description)
        self.notification = notification


def failure_notice(what: str) -> Notification:
    return Notification(description=f"Could not {what}. Please try again.")


async def run_single(what: str, call: Awaitable[T]) -> T:
    """Awaits one flow call, collapsing any model failure into ``StepFailed``."""
    try:
        return await call
    except GenerationError as e:
        logger.error("❌ Failed to %s: %s", what, e)
        raise StepFailed(failure_notice(what)) from e


class CareerPlanner:
    def __init__(self, gemini):
        self.gemini = gemini

    def _begin(self, session: CareerSession, step: str) -> None:
        if step in session.pending:
            raise StepInProgress(f"A {step} request is already in progress.")
        session.pending.add(step)

    def _fail(self, session: CareerSession, what: str, error: Exception) -> StepFailed:
        logger.error("❌ Session %s failed to %s: %s", session.session_id, what, error)
        notice = failure_notice(what)
        session.notifications.append(notice)
        return StepFailed(notice)

    async def submit_profile(
        self, session: CareerSession, profile: StudentProfile
    ) -> CareerRecommendationResult:
        self._begin(session, RECOMMENDATIONS)
        session.profile = profile
        session.recommendations = None
        session.selected_career = None
        session.clear_downstream_of_selection()
        session.selection_token += 1
        session.pending.discard(SKILL_GAPS)
        try:
            result = await flows.recommend_career_paths(
                self.gemini,
                profile.academic_background,
                profile.interests,
                profile.skills,
                profile.goals,
            )
        except GenerationError as e:
            raise self._fail(session, "generate career recommendations", e) from e
        finally:
            session.pending.discard(RECOMMENDATIONS)

        session.recommendations = result
        logger.info(
            "Session %s received %d career options",
            session.session_id,
            len(result.career_options),
        )
        return result

    async def select_career(self, session: CareerSession, career: str) -> SkillGapResult:
        if session.profile is None or session.recommendations is None:
            raise MissingPrerequisite("Submit your profile before choosing a career.")
        if career not in session.recommendations.career_options:
            raise MissingPrerequisite(f"'{career}' is not one of the recommended careers.")

        session.selected_career = career
        session.clear_downstream_of_selection()
        session.selection_token += 1
        token = session.selection_token

        session.pending.add(SKILL_GAPS)
        try:
            result = await flows.analyze_skill_gaps(
                self.gemini, career, session.profile.skill_list()
            )
        except GenerationError as e:
            if token != session.selection_token:
                logger.info("Ignoring failure for superseded selection '%s'", career)
                raise StepFailed(failure_notice("analyze skill gaps")) from e
            raise self._fail(session, "analyze skill gaps", e) from e
        finally:
            if token == session.selection_token:
                session.pending.discard(SKILL_GAPS)

        if token == session.selection_token:
            session.skill_gaps = result
        else:
            logger.info("Discarding skill gaps for superseded selection '%s'", career)
        return result

    async def generate_roadmap(self, session: CareerSession) -> RoadmapResult:
        profile = session.profile
        if profile is None or session.selected_career is None or session.skill_gaps is None:
            raise MissingPrerequisite(
                "Choose a career and wait for the skill gap analysis first."
            )

        self._begin(session, ROADMAP)
        token = session.selection_token
        try:
            result = await flows.generate_roadmap(
                self.gemini,
                student_profile=profile.summary(),
                career_path=session.selected_career,
                current_skills=profile.skills,
                skill_gaps=session.skill_gaps.summary(),
                learning_style=profile.learning_style,
            )
        except GenerationError as e:
            if token != session.selection_token:
                logger.info("Ignoring roadmap failure for superseded selection")
                raise StepFailed(failure_notice("generate a roadmap")) from e
            raise self._fail(session, "generate a roadmap", e) from e
        finally:
            session.pending.discard(ROADMAP)

        if token == session.selection_token:
            session.roadmap = result
            session.narration.reset()
        return result


def control_narration(session: CareerSession, action: str) -> NarrationState:
    """Play, pause, resume or stop playback. Generation already in flight is unaffected."""
    if session.roadmap is None:
        raise MissingPrerequisite("Generate a roadmap before playing its narration.")
    return session.narration.apply(action)


async def plan_school_track(gemini, profile: SchoolProfile) -> SchoolTrackResult:
    """
    Requests the quarterly roadmap and alternative colleges concurrently.
    Each slice succeeds or fails on its own.
    """
    student_profile = profile.summary()
    roadmap, alternatives = await asyncio.gather(
        flows.generate_school_roadmap(gemini, student_profile, profile.learning_style),
        flows.suggest_college_alternatives(gemini, student_profile),
        return_exceptions=True,
    )

    result = SchoolTrackResult()
    for value, slot, what in (
        (roadmap, "roadmap", "generate a school roadmap"),
        (alternatives, "alternatives", "fetch college alternatives"),
    ):
        if isinstance(value, GenerationError):
            logger.error("❌ Failed to %s: %s", what, value)
            result.notifications.append(failure_notice(what))
        elif isinstance(value, BaseException):
            raise value
        else:
            setattr(result, slot, value)
    return result
