from fastapi import APIRouter, Depends
from allergyscan.core.dependencies import get_analysis_client, get_current_session, get_user_supabase
from allergyscan.core.session import Session
from allergyscan.modules.allergies.service import AllergyService
from allergyscan.modules.analysis.gemini_client import GeminiClient
from allergyscan.modules.recommendations.schemas import (
    RecommendationOptions, RecommendationRequest, RecommendationResponse
)
from allergyscan.modules.recommendations.service import RecommendationService
from supabase import Client

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


def get_recommendation_service(
    supabase: Client = Depends(get_user_supabase),
    analyzer: GeminiClient = Depends(get_analysis_client),
) -> RecommendationService:
    return RecommendationService(AllergyService(supabase), analyzer)


@router.get("/options", response_model=RecommendationOptions)
async def get_options(session: Session = Depends(get_current_session)):
    """Meal types and cuisines the client can offer"""
    return RecommendationOptions()


@router.post("", response_model=RecommendationResponse)
async def recommend_meals(
    request: RecommendationRequest,
    session: Session = Depends(get_current_session),
    service: RecommendationService = Depends(get_recommendation_service)
):
    return await service.recommend_meals(session.user_id, request)
