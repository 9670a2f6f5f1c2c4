"""Entry-point: ``python -m irsite.main`` runs the site server under uvicorn."""

from irsite.server import app  # noqa: F401 – re-export for uvicorn

if __name__ == "__main__":
    import logging
    import uvicorn
    from irsite.config import settings

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    uvicorn.run(
        "irsite.main:app",
        host=settings.fastapi_host,
        port=settings.fastapi_port,
        reload=(settings.app_env == "development"),
    )
