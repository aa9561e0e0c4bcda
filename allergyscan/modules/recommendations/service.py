from fastapi import HTTPException
from fastapi.concurrency import run_in_threadpool
from allergyscan.modules.allergies.service import AllergyService
from allergyscan.modules.analysis.gemini_client import AnalysisError, GeminiClient
from allergyscan.modules.recommendations.schemas import RecommendationRequest, RecommendationResponse
import logging

logger = logging.getLogger(__name__)


class RecommendationService:
    def __init__(self, allergy_service: AllergyService, analyzer: GeminiClient):
        self.allergy_service = allergy_service
        self.analyzer = analyzer

    async def recommend_meals(self, user_id: str, request: RecommendationRequest) -> RecommendationResponse:
        """Ask the model for five recipes that avoid every stored allergy"""
        allergies = await run_in_threadpool(self.allergy_service.get_allergy_names, user_id)
        if not allergies:
            raise HTTPException(
                status_code=400,
                detail="Please add your allergies first to get personalized recommendations."
            )
        try:
            text = await self.analyzer.get_meal_recommendations(
                allergies, request.meal_type.lower(), request.cuisine
            )
        except AnalysisError as e:
            raise HTTPException(status_code=502, detail=str(e))
        return RecommendationResponse(
            meal_type=request.meal_type,
            cuisine=request.cuisine,
            allergies=allergies,
            recommendations=text,
        )
