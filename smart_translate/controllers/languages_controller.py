"""
/**
 * @file smart_translate/controllers/languages_controller.py
 * @description 语言列表控制器。
 */
"""

from fastapi import APIRouter

from smart_translate.utils.languages import AUTO_DETECT, LANGUAGES


router = APIRouter()


@router.get("/api/languages")
def list_languages():
    return {
        "languages": [dict(lang, sourceOnly=lang["code"] == AUTO_DETECT) for lang in LANGUAGES],
    }
