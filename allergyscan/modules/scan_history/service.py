from supabase import Client
from allergyscan.modules.scan_history.schemas import ScanRecordCreate, ScanRecordResponse
from typing import List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class ScanHistoryService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_scans(self, user_id: str, limit: Optional[int] = None) -> List[ScanRecordResponse]:
        """List a user's scans, newest first. Without a limit every scan is returned."""
        try:
            query = self.supabase.table("scan_history")\
                .select("*")\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)
            if limit:
                query = query.limit(limit)
            result = query.execute()
            return [ScanRecordResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching scan history for user {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch scan history. Please try again.")

    def get_scan(self, scan_id: str, user_id: str) -> ScanRecordResponse:
        """Get one scan. Another user's scan is reported exactly like a missing one."""
        try:
            result = self.supabase.table("scan_history")\
                .select("*")\
                .eq("id", scan_id)\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching scan {scan_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load scan details. Please try again.")

        if not result.data:
            raise HTTPException(status_code=404, detail="Scan not found")

        try:
            return ScanRecordResponse(**result.data[0])
        except Exception as e:
            logger.error(f"Malformed scan_history row {scan_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to load scan details. Please try again.")

    def create_scan(self, record: ScanRecordCreate) -> ScanRecordResponse:
        """Persist a completed scan"""
        try:
            result = self.supabase.table("scan_history").insert(record.model_dump()).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to save scan. Please try again.")

            return ScanRecordResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error saving scan for user {record.user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to save scan. Please try again.")
