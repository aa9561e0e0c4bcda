from pydantic import BaseModel
from typing import List
from allergyscan.modules.allergies.schemas import AllergyResponse
from allergyscan.modules.scan_history.schemas import ScanRecordResponse


class DashboardResponse(BaseModel):
    email: str
    allergies: List[AllergyResponse]
    allergy_count: int
    recent_scans: List[ScanRecordResponse]
