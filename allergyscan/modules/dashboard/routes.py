from fastapi import APIRouter, Depends
from allergyscan.core.dependencies import get_current_session, get_user_supabase
from allergyscan.core.session import Session
from allergyscan.modules.allergies.service import AllergyService
from allergyscan.modules.dashboard.schemas import DashboardResponse
from allergyscan.modules.dashboard.service import DashboardService
from allergyscan.modules.scan_history.service import ScanHistoryService
from supabase import Client

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_service(supabase: Client = Depends(get_user_supabase)) -> DashboardService:
    return DashboardService(AllergyService(supabase), ScanHistoryService(supabase))


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    session: Session = Depends(get_current_session),
    service: DashboardService = Depends(get_dashboard_service)
):
    return service.get_dashboard(session)
