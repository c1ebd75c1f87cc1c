from fastapi import APIRouter, Depends

from app.dependencies import get_gemini_service
from app.models import (
    CollegeSuggesterForm,
    CollegeSuggestionResult,
    CompanyAlternativesForm,
    CompanyAlternativesResult,
    CompanySuggesterForm,
    CompanySuggestionResult,
)
from app.routers.errors import HANDLED_ERRORS, http_error
from app.services import flows
from app.services.orchestrator import run_single

router = APIRouter()


@router.post("/suggestions/colleges", response_model=CollegeSuggestionResult)
async def suggest_colleges(form: CollegeSuggesterForm, gemini=Depends(get_gemini_service)):
    try:
        return await run_single(
            "fetch college suggestions",
            flows.suggest_colleges(
                gemini,
                course=form.course,
                degree_level=form.degree_level,
                interests=form.interests,
                preferences=form.preferences,
            ),
        )
    except HANDLED_ERRORS as e:
        raise http_error(e)


@router.post("/suggestions/companies", response_model=CompanySuggestionResult)
async def suggest_companies(form: CompanySuggesterForm, gemini=Depends(get_gemini_service)):
    try:
        return await run_single(
            "fetch company suggestions",
            flows.suggest_companies(gemini, form.career_path),
        )
    except HANDLED_ERRORS as e:
        raise http_error(e)


@router.post("/alternatives/companies", response_model=CompanyAlternativesResult)
async def suggest_company_alternatives(
    form: CompanyAlternativesForm, gemini=Depends(get_gemini_service)
):
    """Alternative employers compared against the student's stated goal."""
    try:
        return await run_single(
            "fetch company alternatives",
            flows.suggest_company_alternatives(gemini, form.student_profile, form.career_goal),
        )
    except HANDLED_ERRORS as e:
        raise http_error(e)
