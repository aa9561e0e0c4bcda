from supabase import Client
from allergyscan.modules.allergies.schemas import AllergyCreate, AllergyUpdate, AllergyResponse
from typing import List
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class AllergyService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_allergies(self, user_id: str, order_by: str = "name", desc: bool = False) -> List[AllergyResponse]:
        """List a user's allergies, by name ascending unless told otherwise"""
        try:
            result = self.supabase.table("allergies")\
                .select("*")\
                .eq("user_id", user_id)\
                .order(order_by, desc=desc)\
                .execute()
            return [AllergyResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching allergies for user {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch your allergies. Please try again.")

    def create_allergy(self, user_id: str, allergy_data: AllergyCreate) -> AllergyResponse:
        """Create a new allergy for the user"""
        try:
            result = self.supabase.table("allergies").insert({
                "user_id": user_id,
                "name": allergy_data.name,
                "severity": allergy_data.severity,
                "notes": allergy_data.notes
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to save allergy. Please try again.")

            return AllergyResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error saving allergy for user {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to save allergy. Please try again.")

    def update_allergy(self, allergy_id: str, user_id: str, allergy_data: AllergyUpdate) -> AllergyResponse:
        """Update the supplied fields of one of the user's allergies"""
        update_data = allergy_data.model_dump(include=allergy_data.model_fields_set)
        if update_data.get("name", "") is None:
            update_data.pop("name")
        if update_data.get("severity", "") is None:
            update_data.pop("severity")
        try:
            if not update_data:
                return self.get_allergy(allergy_id, user_id)

            result = self.supabase.table("allergies")\
                .update(update_data)\
                .eq("id", allergy_id)\
                .eq("user_id", user_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Allergy not found")

            return AllergyResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating allergy {allergy_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to save allergy. Please try again.")

    def get_allergy(self, allergy_id: str, user_id: str) -> AllergyResponse:
        try:
            result = self.supabase.table("allergies")\
                .select("*")\
                .eq("id", allergy_id)\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="Allergy not found")
            return AllergyResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching allergy {allergy_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch your allergies. Please try again.")

    def delete_allergy(self, allergy_id: str, user_id: str) -> bool:
        """Delete one of the user's allergies. Returns False when no row matched."""
        try:
            result = self.supabase.table("allergies")\
                .delete()\
                .eq("id", allergy_id)\
                .eq("user_id", user_id)\
                .execute()

            return len(result.data or []) > 0
        except Exception as e:
            logger.error(f"Error deleting allergy {allergy_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete allergy. Please try again.")

    def get_allergy_names(self, user_id: str) -> List[str]:
        return [allergy.name for allergy in self.list_allergies(user_id)]
