from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from allergyscan.config import settings
from allergyscan.core.dependencies import get_analysis_client, get_current_session, get_text_extractor, get_user_supabase
from allergyscan.core.rate_limit import limiter
from allergyscan.core.session import Session
from allergyscan.modules.allergies.service import AllergyService
from allergyscan.modules.analysis.gemini_client import GeminiClient
from allergyscan.modules.ocr.text_extractor import TextExtractor
from allergyscan.modules.scan_history.service import ScanHistoryService
from allergyscan.modules.scans.schemas import MenuScanResponse, ProductScanResponse
from allergyscan.modules.scans.service import ScanService
from supabase import Client
from typing import Optional

router = APIRouter(tags=["scans"])


def get_scan_service(
    supabase: Client = Depends(get_user_supabase),
    extractor: TextExtractor = Depends(get_text_extractor),
    analyzer: GeminiClient = Depends(get_analysis_client),
) -> ScanService:
    return ScanService(AllergyService(supabase), ScanHistoryService(supabase), extractor, analyzer)


async def _read_image(image: Optional[UploadFile]) -> Optional[bytes]:
    if image is None or not image.filename:
        return None
    return await image.read()


@router.post("/scan", response_model=ProductScanResponse)
@limiter.limit(settings.scan_rate_limit)
async def scan_product(
    request: Request,
    image: Optional[UploadFile] = File(None),
    product_name: Optional[str] = Form(None),
    session: Session = Depends(get_current_session),
    service: ScanService = Depends(get_scan_service)
):
    """
    Scan a product's ingredient label. Extracts text from the image,
    splits it into ingredients, checks them against the user's allergies
    and saves the result to the scan history.
    """
    return await service.scan_product(session.user_id, await _read_image(image), product_name)


@router.post("/menu-scanner", response_model=MenuScanResponse)
@limiter.limit(settings.scan_rate_limit)
async def scan_menu(
    request: Request,
    image: Optional[UploadFile] = File(None),
    restaurant_name: Optional[str] = Form(None),
    session: Session = Depends(get_current_session),
    service: ScanService = Depends(get_scan_service)
):
    """Scan a restaurant menu and get per-item allergy advice"""
    return await service.scan_menu(session.user_id, await _read_image(image), restaurant_name)
