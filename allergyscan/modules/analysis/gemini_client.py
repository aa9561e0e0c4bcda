import logging
from typing import Optional, Sequence

import google.generativeai as genai

from allergyscan.config import settings
from allergyscan.modules.analysis.ingredients import match_allergies
from allergyscan.modules.analysis.prompts import build_ingredient_prompt, build_meal_prompt, build_menu_prompt
from allergyscan.modules.analysis.schemas import IngredientAnalysis

logger = logging.getLogger(__name__)


class AnalysisError(Exception):
    """Raised when the language model call fails for any reason."""


class GeminiClient:
    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        api_key = api_key or settings.gemini_api_key
        if not api_key:
            raise ValueError("GEMINI_API_KEY must be configured")
        genai.configure(api_key=api_key)
        self.model_name = model_name or settings.gemini_model
        self.model = genai.GenerativeModel(self.model_name)

    async def _generate(self, prompt: str, failure_message: str) -> str:
        try:
            response = await self.model.generate_content_async(prompt)
            return response.text
        except Exception as e:
            logger.error(f"Error calling Gemini API ({self.model_name}): {e}")
            raise AnalysisError(failure_message) from e

    async def analyze_ingredients(self, ingredients: Sequence[str], allergies: Sequence[str]) -> IngredientAnalysis:
        """Match allergies locally, then ask the model to explain the risk or confirm safety."""
        matched = match_allergies(ingredients, allergies)
        prompt = build_ingredient_prompt(ingredients, allergies, matched)
        text = await self._generate(prompt, "Failed to analyze ingredients")
        return IngredientAnalysis(text=text, has_matches=bool(matched), matched_allergies=matched)

    async def get_meal_recommendations(self, allergies: Sequence[str], meal_type: str, cuisine: Optional[str] = None) -> str:
        prompt = build_meal_prompt(allergies, meal_type, cuisine)
        return await self._generate(prompt, "Failed to generate meal recommendations")

    async def analyze_menu_items(self, menu_text: str, allergies: Sequence[str]) -> str:
        prompt = build_menu_prompt(menu_text, allergies)
        return await self._generate(prompt, "Failed to analyze menu items")
