from fastapi import APIRouter, Depends, Query
from allergyscan.core.dependencies import get_current_session, get_user_supabase
from allergyscan.core.session import Session
from allergyscan.modules.scan_history.schemas import ScanRecordResponse
from allergyscan.modules.scan_history.service import ScanHistoryService
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/history", tags=["history"])


def get_scan_history_service(supabase: Client = Depends(get_user_supabase)) -> ScanHistoryService:
    return ScanHistoryService(supabase)


@router.get("", response_model=List[ScanRecordResponse])
async def list_scans(
    limit: Optional[int] = Query(None, ge=1),
    session: Session = Depends(get_current_session),
    service: ScanHistoryService = Depends(get_scan_history_service)
):
    """List past scans, newest first"""
    return service.list_scans(session.user_id, limit=limit)


@router.get("/{scan_id}", response_model=ScanRecordResponse)
async def get_scan(
    scan_id: str,
    session: Session = Depends(get_current_session),
    service: ScanHistoryService = Depends(get_scan_history_service)
):
    """Get a single scan owned by the current user"""
    return service.get_scan(scan_id, session.user_id)
