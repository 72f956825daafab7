"""Run the API with uvicorn: ``python -m kanban``."""

import uvicorn

from kanban.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "kanban.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
