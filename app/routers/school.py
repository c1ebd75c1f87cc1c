from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_gemini_service
from app.models import SchoolProfile, SchoolTrackResult
from app.services.orchestrator import plan_school_track
from app.services.presentation import bar_chart_data, flowchart_cards

router = APIRouter(prefix="/school")


@router.post("/roadmap", response_model=SchoolTrackResult)
async def school_roadmap(profile: SchoolProfile, gemini=Depends(get_gemini_service)):
    """
    Quarterly college-entrance roadmap and alternative colleges, fetched
    side by side. A slice that failed comes back as a notification while
    the other slice is still returned; only when both fail is the status 502.
    """
    result = await plan_school_track(gemini, profile)
    if result.roadmap is None and result.alternatives is None:
        return JSONResponse(
            status_code=502, content=result.model_dump(by_alias=True, mode="json")
        )
    return result


@router.post("/roadmap/view")
async def school_roadmap_view(profile: SchoolProfile, gemini=Depends(get_gemini_service)):
    """Same request as ``/school/roadmap`` with the milestones pre-shaped for cards and the bar chart."""
    result = await plan_school_track(gemini, profile)
    milestones = result.roadmap.milestones if result.roadmap else []
    body = {
        "flowchart": flowchart_cards(milestones),
        "chart": bar_chart_data(milestones),
        "audioRoadmap": result.roadmap.audio_roadmap if result.roadmap else None,
        "alternatives": (
            result.alternatives.model_dump(by_alias=True, mode="json")
            if result.alternatives
            else None
        ),
        "notifications": [n.model_dump(by_alias=True, mode="json") for n in result.notifications],
    }
    if result.roadmap is None and result.alternatives is None:
        return JSONResponse(status_code=502, content=body)
    return body
