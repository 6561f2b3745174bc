"""CLI entrypoint printing the host identity report."""
from __future__ import annotations

import json
import logging

from .binder import BindingError
from .config import get_settings
from .snapshot import describe, load_environment


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level {name!r}")
    return level


def main() -> None:
    snapshot = load_environment()
    try:
        settings = get_settings()
        level = _log_level(settings.hostenv_log_level)
    except (BindingError, ValueError) as exc:
        raise SystemExit(f"hostenv: {exc}") from exc

    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")
    logging.info("Environment loaded: host=%s user=%s separator=%r", snapshot.host, snapshot.user, snapshot.separator)

    print(json.dumps(describe(snapshot), indent=settings.hostenv_indent))


if __name__ == "__main__":
    main()
