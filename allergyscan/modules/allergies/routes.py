from fastapi import APIRouter, Depends, HTTPException
from allergyscan.core.dependencies import get_current_session, get_user_supabase
from allergyscan.core.session import Session
from allergyscan.modules.allergies.schemas import AllergyCreate, AllergyUpdate, AllergyResponse
from allergyscan.modules.allergies.service import AllergyService
from supabase import Client
from typing import List

router = APIRouter(prefix="/allergies", tags=["allergies"])


def get_allergy_service(supabase: Client = Depends(get_user_supabase)) -> AllergyService:
    return AllergyService(supabase)


@router.get("", response_model=List[AllergyResponse])
async def list_allergies(
    session: Session = Depends(get_current_session),
    service: AllergyService = Depends(get_allergy_service)
):
    """List the current user's allergies ordered by name"""
    return service.list_allergies(session.user_id)


@router.post("", response_model=AllergyResponse, status_code=201)
async def create_allergy(
    allergy_data: AllergyCreate,
    session: Session = Depends(get_current_session),
    service: AllergyService = Depends(get_allergy_service)
):
    """Add an allergy; severity defaults to mild"""
    return service.create_allergy(session.user_id, allergy_data)


@router.put("/{allergy_id}", response_model=AllergyResponse)
async def update_allergy(
    allergy_id: str,
    allergy_data: AllergyUpdate,
    session: Session = Depends(get_current_session),
    service: AllergyService = Depends(get_allergy_service)
):
    return service.update_allergy(allergy_id, session.user_id, allergy_data)


@router.delete("/{allergy_id}", status_code=204)
async def delete_allergy(
    allergy_id: str,
    session: Session = Depends(get_current_session),
    service: AllergyService = Depends(get_allergy_service)
):
    if not service.delete_allergy(allergy_id, session.user_id):
        raise HTTPException(status_code=404, detail="Allergy not found")
    return None
