"""
Scan pipelines: image -> OCR -> analysis -> history record.

Both pipelines run strictly in sequence and stop at the first failure.
Nothing is written to scan_history unless every earlier step succeeded.
"""
from fastapi import HTTPException
from fastapi.concurrency import run_in_threadpool
from allergyscan.modules.allergies.service import AllergyService
from allergyscan.modules.analysis.gemini_client import AnalysisError, GeminiClient
from allergyscan.modules.analysis.ingredients import extract_ingredients, ingredient_matches, looks_like_ingredient_list
from allergyscan.modules.analysis.prompts import UPLOAD_CORRECT_IMAGE
from allergyscan.modules.analysis.schemas import IngredientAnalysis
from allergyscan.modules.ocr.text_extractor import TextExtractionError, TextExtractor
from allergyscan.modules.scan_history.schemas import ScanRecordCreate
from allergyscan.modules.scan_history.service import ScanHistoryService
from allergyscan.modules.scans.schemas import MenuScanResponse, ProductScanResponse
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

UNNAMED_PRODUCT = "Unnamed Product"
UNKNOWN_RESTAURANT = "Unknown Restaurant"
OCR_FAILED_MESSAGE = "Failed to process the image. Please try again with a clearer image."


class ScanService:
    def __init__(
        self,
        allergy_service: AllergyService,
        history_service: ScanHistoryService,
        extractor: TextExtractor,
        analyzer: GeminiClient,
    ):
        self.allergy_service = allergy_service
        self.history_service = history_service
        self.extractor = extractor
        self.analyzer = analyzer

    async def _require_allergies(self, user_id: str) -> List[str]:
        names = await run_in_threadpool(self.allergy_service.get_allergy_names, user_id)
        if not names:
            raise HTTPException(status_code=400, detail="Please add at least one allergy before scanning")
        return names

    @staticmethod
    def _require_image(image_bytes: Optional[bytes]) -> bytes:
        if not image_bytes:
            raise HTTPException(status_code=400, detail="Please select an image to scan")
        return image_bytes

    async def _extract_text(self, image_bytes: bytes) -> str:
        try:
            return await run_in_threadpool(self.extractor.extract_text, image_bytes)
        except TextExtractionError:
            raise HTTPException(status_code=422, detail=OCR_FAILED_MESSAGE)

    async def scan_product(self, user_id: str, image_bytes: Optional[bytes], product_name: Optional[str] = None) -> ProductScanResponse:
        """Check a photographed ingredient label against the user's allergies"""
        image_bytes = self._require_image(image_bytes)
        allergies = await self._require_allergies(user_id)
        product_name = (product_name or "").strip() or UNNAMED_PRODUCT

        text = await self._extract_text(image_bytes)
        ingredients = extract_ingredients(text)

        if not looks_like_ingredient_list(ingredients):
            logger.info(f"No ingredient list recognised in image from user {user_id}")
            return ProductScanResponse(
                product_name=product_name,
                extracted_text=text,
                ingredients=[],
                analysis=IngredientAnalysis(text=UPLOAD_CORRECT_IMAGE, has_matches=False, matched_allergies=[]),
            )

        try:
            analysis = await self.analyzer.analyze_ingredients(ingredients, allergies)
        except AnalysisError as e:
            raise HTTPException(status_code=502, detail=str(e))

        record = await run_in_threadpool(self.history_service.create_scan, ScanRecordCreate(
            user_id=user_id,
            product_name=product_name,
            ingredients=ingredients,
            matched_allergies=analysis.matched_allergies,
            has_matches=analysis.has_matches,
            analysis=analysis.text,
        ))
        logger.info(f"Product scan {record.id} saved (has_matches={analysis.has_matches})")
        return ProductScanResponse(
            product_name=product_name,
            extracted_text=text,
            ingredients=ingredients,
            flagged_ingredients=[i for i in ingredients if ingredient_matches(i, analysis.matched_allergies)],
            analysis=analysis,
            scan=record,
        )

    async def scan_menu(self, user_id: str, image_bytes: Optional[bytes], restaurant_name: Optional[str] = None) -> MenuScanResponse:
        """Triage a photographed restaurant menu against the user's allergies"""
        image_bytes = self._require_image(image_bytes)
        allergies = await self._require_allergies(user_id)
        restaurant_name = (restaurant_name or "").strip() or UNKNOWN_RESTAURANT

        text = await self._extract_text(image_bytes)

        try:
            analysis = await self.analyzer.analyze_menu_items(text, allergies)
        except AnalysisError as e:
            raise HTTPException(status_code=502, detail=str(e))

        # Menus are always stored as flagged, whatever the model said
        record = await run_in_threadpool(self.history_service.create_scan, ScanRecordCreate(
            user_id=user_id,
            product_name=f"Menu: {restaurant_name}",
            ingredients=[text],
            matched_allergies=allergies,
            has_matches=True,
            analysis=analysis,
        ))
        logger.info(f"Menu scan {record.id} saved")
        return MenuScanResponse(
            restaurant_name=restaurant_name,
            extracted_text=text,
            allergies=allergies,
            analysis=analysis,
            scan=record,
        )
