from pydantic import BaseModel, field_validator
from typing import List, Optional

MEAL_TYPES = ["Breakfast", "Lunch", "Dinner", "Snacks", "Desserts"]
ANY_CUISINE = "Any"
CUISINES = [
    ANY_CUISINE,
    "Italian",
    "Mexican",
    "Chinese",
    "Indian",
    "Japanese",
    "Mediterranean",
    "American",
    "Thai",
    "French",
]


class RecommendationOptions(BaseModel):
    meal_types: List[str] = MEAL_TYPES
    cuisines: List[str] = CUISINES


class RecommendationRequest(BaseModel):
    meal_type: str = MEAL_TYPES[0]
    cuisine: Optional[str] = None

    @field_validator("meal_type")
    @classmethod
    def known_meal_type(cls, value: str) -> str:
        for meal_type in MEAL_TYPES:
            if meal_type.lower() == value.strip().lower():
                return meal_type
        raise ValueError(f"meal_type must be one of: {', '.join(MEAL_TYPES)}")

    @field_validator("cuisine")
    @classmethod
    def known_cuisine(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        for cuisine in CUISINES:
            if cuisine.lower() == value.strip().lower():
                return None if cuisine == ANY_CUISINE else cuisine
        raise ValueError(f"cuisine must be one of: {', '.join(CUISINES)}")


class RecommendationResponse(BaseModel):
    meal_type: str
    cuisine: Optional[str] = None
    allergies: List[str]
    recommendations: str
