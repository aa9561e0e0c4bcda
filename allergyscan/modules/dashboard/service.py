from allergyscan.core.session import Session
from allergyscan.modules.allergies.service import AllergyService
from allergyscan.modules.dashboard.schemas import DashboardResponse
from allergyscan.modules.scan_history.service import ScanHistoryService

DASHBOARD_ALLERGY_COUNT = 5
DASHBOARD_RECENT_SCANS = 3


class DashboardService:
    def __init__(self, allergy_service: AllergyService, history_service: ScanHistoryService):
        self.allergy_service = allergy_service
        self.history_service = history_service

    def get_dashboard(self, session: Session) -> DashboardResponse:
        """Newest allergies first, plus the last few scans"""
        allergies = self.allergy_service.list_allergies(session.user_id, order_by="created_at", desc=True)
        recent_scans = self.history_service.list_scans(session.user_id, limit=DASHBOARD_RECENT_SCANS)
        return DashboardResponse(
            email=session.email,
            allergies=allergies[:DASHBOARD_ALLERGY_COUNT],
            allergy_count=len(allergies),
            recent_scans=recent_scans,
        )
