"""Run the task API with uvicorn: ``python -m tareas_api``."""

import uvicorn

from .deps import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "tareas_api.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
