import time
import uuid
import logging
from collections import OrderedDict
from typing import Callable, List, Optional, Set

from app.config import settings
from app.models import (
    CareerRecommendationResult,
    CareerSessionView,
    Notification,
    RoadmapResult,
    SkillGapResult,
    StudentProfile,
)
from app.services.narration import NarrationController

logger = logging.getLogger(__name__)


class SessionNotFound(Exception):
    pass


class CareerSession:
    """View state of one career-track page session. Lives in memory only."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        self.profile: Optional[StudentProfile] = None
        self.recommendations: Optional[CareerRecommendationResult] = None
        self.selected_career: Optional[str] = None
        self.skill_gaps: Optional[SkillGapResult] = None
        self.roadmap: Optional[RoadmapResult] = None
        self.notifications: List[Notification] = []
        self.pending: Set[str] = set()
        self.narration = NarrationController()
        # Bumped whenever a new profile or career invalidates in-flight results
        self.selection_token = 0
        self.last_used = 0.0

    def clear_downstream_of_selection(self) -> None:
        self.skill_gaps = None
        self.roadmap = None
        self.narration.reset()

    def view(self) -> CareerSessionView:
        return CareerSessionView(
            session_id=self.session_id,
            profile=self.profile,
            recommendations=self.recommendations,
            selected_career=self.selected_career,
            skill_gaps=self.skill_gaps,
            roadmap=self.roadmap,
            pending=sorted(self.pending),
            narration=self.narration.state.value,
            notifications=list(self.notifications),
        )


class SessionStore:
    """
    Bounded in-memory store. Sessions idle for longer than ``ttl_seconds`` are
    evicted, and once ``max_sessions`` is reached the least recently used
    session makes room for a new one.
    """

    def __init__(
        self,
        max_sessions: int = None,
        ttl_seconds: float = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_sessions = max_sessions or settings.max_sessions
        self.ttl_seconds = ttl_seconds or settings.session_ttl_seconds
        self._clock = clock
        self._sessions: "OrderedDict[str, CareerSession]" = OrderedDict()

    def _evict_expired(self, now: float) -> None:
        while self._sessions:
            session_id, session = next(iter(self._sessions.items()))
            if now - session.last_used <= self.ttl_seconds:
                break
            del self._sessions[session_id]
            logger.info("Expired idle career session %s", session_id)

    def create(self) -> CareerSession:
        now = self._clock()
        self._evict_expired(now)
        while len(self._sessions) >= self.max_sessions:
            session_id, _ = self._sessions.popitem(last=False)
            logger.warning("Session limit %d reached, evicted %s", self.max_sessions, session_id)

        session = CareerSession(uuid.uuid4().hex)
        session.last_used = now
        self._sessions[session.session_id] = session
        logger.info("Created career session %s", session.session_id)
        return session

    def get(self, session_id: str) -> CareerSession:
        now = self._clock()
        self._evict_expired(now)
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(f"Session '{session_id}' not found.")
        session.last_used = now
        self._sessions.move_to_end(session_id)
        return session

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFound(f"Session '{session_id}' not found.")
        logger.info("Discarded career session %s", session_id)

    def __len__(self) -> int:
        return len(self._sessions)
