from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from typing import Any, List, Optional, Union

from app.dependencies import get_career_planner, get_session_store
from app.models import (
    CareerRecommendationResult,
    CareerSelection,
    CareerSessionView,
    RoadmapResult,
    SkillGapResult,
    StudentProfile,
)
from app.routers.errors import HANDLED_ERRORS, http_error
from app.services.narration import ACTIONS
from app.services.orchestrator import CareerPlanner, control_narration
from app.services.presentation import render_milestones
from app.services.session_store import SessionStore

router = APIRouter(prefix="/career/sessions")


class RecommendationsResponse(BaseModel):
    session_id: str = Field(alias="sessionId")
    recommendations: CareerRecommendationResult

    class Config:
        populate_by_name = True


class RoadmapViewResponse(BaseModel):
    layout: str
    view: Union[str, List[Any]]


class NarrationResponse(BaseModel):
    state: str
    audio_roadmap: Optional[str] = Field(alias="audioRoadmap", default=None)

    class Config:
        populate_by_name = True


@router.post("", response_model=RecommendationsResponse, status_code=201)
async def submit_profile(
    profile: StudentProfile,
    store: SessionStore = Depends(get_session_store),
    planner: CareerPlanner = Depends(get_career_planner),
):
    """
    Step 1: store the profile in a new session and fetch 3-5 career options.
    """
    session = store.create()
    try:
        recommendations = await planner.submit_profile(session, profile)
    except HANDLED_ERRORS as e:
        store.delete(session.session_id)
        raise http_error(e)
    return RecommendationsResponse(session_id=session.session_id, recommendations=recommendations)


@router.put("/{session_id}/profile", response_model=CareerRecommendationResult)
async def resubmit_profile(
    session_id: str,
    profile: StudentProfile,
    store: SessionStore = Depends(get_session_store),
    planner: CareerPlanner = Depends(get_career_planner),
):
    """Resubmits the profile form in an existing session, resetting everything downstream."""
    try:
        session = store.get(session_id)
        return await planner.submit_profile(session, profile)
    except HANDLED_ERRORS as e:
        raise http_error(e)


@router.get("/{session_id}", response_model=CareerSessionView)
async def get_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    try:
        return store.get(session_id).view()
    except HANDLED_ERRORS as e:
        raise http_error(e)


@router.delete("/{session_id}", status_code=204)
async def discard_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    try:
        store.delete(session_id)
    except HANDLED_ERRORS as e:
        raise http_error(e)


@router.post("/{session_id}/select", response_model=SkillGapResult)
async def select_career(
    session_id: str,
    selection: CareerSelection,
    store: SessionStore = Depends(get_session_store),
    planner: CareerPlanner = Depends(get_career_planner),
):
    """Step 2: pick one recommended career and analyze the skill gaps for it."""
    try:
        session = store.get(session_id)
        return await planner.select_career(session, selection.career)
    except HANDLED_ERRORS as e:
        raise http_error(e)


@router.post("/{session_id}/roadmap", response_model=RoadmapResult)
async def generate_roadmap(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
    planner: CareerPlanner = Depends(get_career_planner),
):
    """Step 3: build the monthly roadmap, narrated for auditory learners."""
    try:
        session = store.get(session_id)
        return await planner.generate_roadmap(session)
    except HANDLED_ERRORS as e:
        raise http_error(e)


@router.get("/{session_id}/roadmap/view", response_model=RoadmapViewResponse)
async def view_roadmap(
    session_id: str,
    layout: str = Query("flowchart", pattern="^(flowchart|accordion|chart|mermaid)$"),
    store: SessionStore = Depends(get_session_store),
):
    try:
        session = store.get(session_id)
    except HANDLED_ERRORS as e:
        raise http_error(e)
    milestones = session.roadmap.milestones if session.roadmap else []
    return RoadmapViewResponse(layout=layout, view=render_milestones(milestones, layout))


@router.post("/{session_id}/narration/{action}", response_model=NarrationResponse)
async def narration_action(
    session_id: str,
    action: str,
    store: SessionStore = Depends(get_session_store),
):
    if action not in ACTIONS:
        raise HTTPException(status_code=400, detail=f"Unknown narration action '{action}'.")
    try:
        session = store.get(session_id)
        state = control_narration(session, action)
    except HANDLED_ERRORS as e:
        raise http_error(e)
    return NarrationResponse(state=state.value, audio_roadmap=session.roadmap.audio_roadmap)
