from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import parse_clock_time
from .common.web import register_error_handlers
from .container import build_container
from .storage.factory import build_storage
from .storage.local_storage import LocalStorage
from .attendance.controller import register as register_attendance
from .leave.controller import register as register_leave
from .payroll.controller import register as register_payroll
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def configure_logging(settings) -> None:
    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format=getattr(settings, "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
    )


def create_app(*, settings_module: Optional[str] = None, storage: Optional[LocalStorage] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(settings)

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if storage is None:
        storage = build_storage(
            backend=getattr(settings, "STORAGE_BACKEND", "sqlite"),
            path=getattr(settings, "STORAGE_PATH", ""),
        )

    container = build_container(
        storage=storage,
        late_cutoff=parse_clock_time(str(getattr(settings, "LATE_CUTOFF", "09:00"))),
        poll_seconds=float(getattr(settings, "ATTENDANCE_POLL_SECONDS", 0) or 0),
        leave_poll_seconds=float(getattr(settings, "LEAVE_POLL_SECONDS", 0) or 0),
    )
    app.extensions["hr_dashboard"] = container

    logger.debug("settings=%s storage=%s", settings_module, type(storage).__name__)

    # Every request re-reads storage, so watchers only need to report foreign writes.
    for watcher in (container.attendance_watcher, container.leave_watcher):
        if watcher is not None:
            watcher.subscribe(lambda key: logger.info("%s changed by another session", key))
            watcher.start()

    register_error_handlers(app)
    register_users(app, container)
    register_attendance(app, container)
    register_leave(app, container)
    register_payroll(app, container)

    return app
