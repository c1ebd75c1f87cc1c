import logging

from fastapi import Depends, HTTPException

from .config import settings
from .services.gemini_service import GeminiService, GenerationError
from .services.orchestrator import CareerPlanner
from .services.session_store import SessionStore

logger = logging.getLogger(__name__)

_gemini_service: GeminiService = None
_session_store: SessionStore = None


def get_gemini_service() -> GeminiService:
    global _gemini_service
    if _gemini_service is None:
        try:
            _gemini_service = GeminiService.from_settings(settings)
        except GenerationError as e:
            logger.error("⚠️ Gemini not configured: %s", e)
            raise HTTPException(status_code=503, detail="Gemini not configured.")
        except Exception as e:
            raise HTTPException(
                status_code=500,
                detail=f"Failed to initialize Gemini client: {str(e)}",
            )
    return _gemini_service


def get_session_store() -> SessionStore:
    global _session_store
    if _session_store is None:
        _session_store = SessionStore()
    return _session_store


def get_career_planner(gemini: GeminiService = Depends(get_gemini_service)) -> CareerPlanner:
    return CareerPlanner(gemini)
