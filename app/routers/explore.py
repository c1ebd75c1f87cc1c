from fastapi import APIRouter, Depends

from app.dependencies import get_gemini_service
from app.models import CareerExplorationResult, ExplorerForm
from app.routers.errors import HANDLED_ERRORS, http_error
from app.services import flows
from app.services.orchestrator import run_single

router = APIRouter()


@router.post("/explore", response_model=CareerExplorationResult)
async def explore_career_paths(form: ExplorerForm, gemini=Depends(get_gemini_service)):
    """
    Suggests 3-5 career paths together with the skills still missing for each.
    """
    try:
        return await run_single(
            "explore career paths",
            flows.explore_career_paths(
                gemini,
                interests=form.interests,
                skills=form.skills,
                goals=form.goals,
                academic_background=form.academic_background,
            ),
        )
    except HANDLED_ERRORS as e:
        raise http_error(e)
