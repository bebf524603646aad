from __future__ import annotations

import importlib
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_HOURLY_WAGE
from .core.exceptions import StorageError
from .records.controller import register as register_records
from .summaries.controller import register as register_summaries

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DEFAULT_HOURLY_WAGE"] = getattr(settings, "DEFAULT_HOURLY_WAGE", DEFAULT_HOURLY_WAGE)
    app.json.ensure_ascii = False

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        local_store_path = Path(getattr(settings, "LOCAL_STORE_PATH"))
        github_config = getattr(settings, "GITHUB_CONFIG", {})
        container = build_container(local_store_path=local_store_path, github_config=github_config)

    logger.info(
        "[work-tracker] settings=%s mode=%s local=%s",
        settings_module,
        container.record_service.mode.value,
        container.local_storage.path,
    )

    @app.errorhandler(StorageError)
    def handle_storage_error(e: StorageError):
        logger.exception("Storage failure: %s", e)
        return jsonify({"success": False, "message": "데이터를 불러오는데 실패했습니다."}), 500

    app.extensions["work_tracker"] = container
    register_records(app, container)
    register_summaries(app, container)

    return app


if __name__ == "__main__":
    app = create_app()
    # Single worker thread: the record list lives in process memory.
    app.run(
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "5000")),
        debug=app.config["DEBUG"],
        threaded=False,
    )
