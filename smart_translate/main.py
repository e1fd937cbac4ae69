"""
/**
 * @file smart_translate/main.py
 * @description FastAPI 应用入口（仅装配路由、中间件与配置热加载）。
 */
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from smart_translate.config import CONFIG_DIR, CONFIG_LOCAL_PATH, CONFIG_PATH, load_settings, reload_settings
from smart_translate.controllers import health_router, languages_router, translate_router


logger = logging.getLogger("smart_translate")


class ConfigEventHandler(FileSystemEventHandler):
    """Handler for config file changes"""

    def on_modified(self, event):
        if event.is_directory:
            return
        if os.path.abspath(event.src_path) in (CONFIG_PATH, CONFIG_LOCAL_PATH):
            reload_settings()


def start_config_watcher():
    observer = Observer()
    observer.schedule(ConfigEventHandler(), CONFIG_DIR, recursive=False)
    observer.start()
    logger.info(f"Config watcher started on {CONFIG_DIR}")
    return observer


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info(f"Smart Translate starting up (model: {settings.llm_model})")
    if not settings.resolve_llm_key():
        logger.warning("No language model API key configured; translations will fail.")

    observer = None
    try:
        observer = start_config_watcher()
    except OSError as e:
        logger.error(f"Failed to start config watcher: {e}")

    yield

    if observer:
        observer.stop()
        observer.join()
    logger.info("Smart Translate shutting down")


def flatten_validation_errors(errors: List[Dict[str, Any]]) -> Dict[str, List[str]]:
    details: Dict[str, List[str]] = {}
    for err in errors:
        loc = [part for part in err.get("loc", ()) if part != "body"]
        field = str(loc[-1]) if loc and isinstance(loc[-1], str) else "body"
        message = str(err.get("msg", "Invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.setdefault(field, []).append(message)
    return details


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body.", "details": flatten_validation_errors(exc.errors())},
    )


app = FastAPI(title="Smart Translate API", version="0.1.0", lifespan=lifespan)

app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=load_settings().cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(languages_router)
app.include_router(translate_router)
