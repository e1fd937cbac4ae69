"""
/**
 * @file smart_translate/controllers/translate_controller.py
 * @description 翻译控制器：POST /api/translate。
 */
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from smart_translate.models.translate_request_model import TranslateRequest
from smart_translate.models.translation_result_model import LowConfidenceFallback
from smart_translate.services import run


logger = logging.getLogger("smart_translate")
router = APIRouter()


@router.post("/api/translate")
def translate(req: TranslateRequest):
    try:
        result = run(req.text, req.targetLanguage)
    except Exception as e:
        logger.exception("Translation API Error")
        return JSONResponse(status_code=500, content={"error": f"Failed to get translation: {e}"})

    if isinstance(result, LowConfidenceFallback):
        return JSONResponse(
            status_code=400,
            content={
                "error": result.message,
                "detectedLanguage": result.detectedLanguage,
                "confidence": result.confidence,
            },
        )

    return result.to_dict()
