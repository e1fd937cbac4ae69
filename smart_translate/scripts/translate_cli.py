"""
/**
 * @file smart_translate/scripts/translate_cli.py
 * @description 命令行客户端：翻译、查看本地历史、启动 HTTP 服务。
 */
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from smart_translate.config import load_settings
from smart_translate.models.translation_result_model import LowConfidenceFallback, TranslationResult
from smart_translate.services.history_service import HistoryStore, TranslateSession
from smart_translate.services.llm_client_service import LanguageModelClient
from smart_translate.utils.languages import AUTO_DETECT, language_name
from smart_translate.utils.storage_utils import JsonFileKeyValueStore

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_LOW_CONFIDENCE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="smart-translate")
    parser.add_argument("--store", default=None, help="Path of the local history/cache file")
    parser.add_argument("--log-level", default=None)
    # --store is accepted before or after the subcommand
    store_parent = argparse.ArgumentParser(add_help=False)
    store_parent.add_argument("--store", default=argparse.SUPPRESS, help="Path of the local history/cache file")
    sub = parser.add_subparsers(dest="command", required=True)

    p_translate = sub.add_parser(
        "translate", parents=[store_parent], help="Detect the language of TEXT and translate it"
    )
    p_translate.add_argument("text")
    p_translate.add_argument("--to", dest="target", required=True)
    p_translate.add_argument("--from", dest="source", default=AUTO_DETECT)
    p_translate.add_argument("--offline", action="store_true", help="Only answer from the offline cache")

    p_history = sub.add_parser("history", parents=[store_parent], help="Show recent translations, newest first")
    p_history.add_argument("--clear", action="store_true")

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default="0.0.0.0")
    p_serve.add_argument("--port", type=int, default=8000)
    return parser


def _cmd_translate(args, session: TranslateSession) -> int:
    outcome = session.translate(args.text, args.target, source_lang=args.source, offline=args.offline)
    if isinstance(outcome, TranslationResult):
        sys.stdout.write(outcome.translation + "\n")
        if args.offline:
            sys.stdout.write("Translated from offline cache.\n")
        elif args.source == AUTO_DETECT:
            name = language_name(outcome.detectedLanguage)
            sys.stdout.write(f"Detected: {name} (Confidence: {round(outcome.confidence * 100)}%)\n")
        return EXIT_OK
    if isinstance(outcome, LowConfidenceFallback):
        sys.stderr.write(
            f"{outcome.message} (detected {outcome.detectedLanguage}, confidence {outcome.confidence:.2f})\n"
        )
        return EXIT_LOW_CONFIDENCE
    sys.stderr.write(outcome.error + "\n")
    return EXIT_ERROR


def _cmd_history(args, history: HistoryStore) -> int:
    if args.clear:
        history.clear()
        sys.stdout.write("History cleared.\n")
        return EXIT_OK
    for entry in history.list():
        sys.stdout.write(f"[{entry.id}] {entry.sourceLang} -> {entry.targetLang}\n")
        sys.stdout.write(f"  {entry.sourceText}\n  {entry.translatedText}\n")
    return EXIT_OK


def _cmd_serve(args) -> int:
    import uvicorn

    uvicorn.run("smart_translate.main:app", host=args.host, port=args.port)
    return EXIT_OK


def main(argv: Optional[List[str]] = None, client: Optional[LanguageModelClient] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    logging.basicConfig(level=getattr(logging, (args.log_level or "WARNING").upper(), logging.WARNING))

    if args.command == "serve":
        return _cmd_serve(args)

    store = JsonFileKeyValueStore(args.store or settings.store_path)
    session = TranslateSession(store, client=client, history_limit=settings.history_limit)
    if args.command == "history":
        return _cmd_history(args, session.history)
    return _cmd_translate(args, session)


if __name__ == "__main__":
    sys.exit(main())
