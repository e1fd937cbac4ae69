"""
/**
 * @file smart_translate/controllers/health_controller.py
 * @description 健康检查控制器。
 */
"""

from fastapi import APIRouter


router = APIRouter()


@router.get("/health")
def health():
    from smart_translate.config import load_settings

    settings = load_settings()

    llm_status = {
        "api_key": bool(settings.resolve_llm_key()),
        "endpoint": bool(settings.llm_endpoint),
    }
    is_healthy = all(llm_status.values())

    return {
        "status": "ok" if is_healthy else "degraded",
        "checks": {
            "llm": llm_status,
        },
        "model": settings.llm_model,
    }
