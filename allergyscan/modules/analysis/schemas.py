from pydantic import BaseModel
from typing import List


class IngredientAnalysis(BaseModel):
    text: str
    has_matches: bool
    matched_allergies: List[str] = []
