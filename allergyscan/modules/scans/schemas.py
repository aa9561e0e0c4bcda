from pydantic import BaseModel
from typing import List, Optional
from allergyscan.modules.analysis.schemas import IngredientAnalysis
from allergyscan.modules.scan_history.schemas import ScanRecordResponse


class ProductScanResponse(BaseModel):
    product_name: str
    extracted_text: str
    ingredients: List[str] = []
    flagged_ingredients: List[str] = []
    analysis: IngredientAnalysis
    scan: Optional[ScanRecordResponse] = None  # None when the image held no ingredient list


class MenuScanResponse(BaseModel):
    restaurant_name: str
    extracted_text: str
    allergies: List[str]
    analysis: str
    scan: ScanRecordResponse
