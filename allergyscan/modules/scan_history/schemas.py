from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime


class ScanRecordCreate(BaseModel):
    user_id: str
    product_name: Optional[str] = None
    ingredients: List[str] = []
    matched_allergies: List[str] = []
    has_matches: bool = False
    analysis: str


class ScanRecordResponse(BaseModel):
    id: str
    user_id: str
    product_name: Optional[str] = None
    ingredients: List[str] = []
    matched_allergies: List[str] = []
    has_matches: bool
    analysis: str
    created_at: datetime

    class Config:
        from_attributes = True
