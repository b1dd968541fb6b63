import uvicorn

from terminal_cv.config.settings import settings


def main(argv: list[str] | None = None) -> int:
    # Run FastAPI app from terminal_cv.main:app
    uvicorn.run(
        "terminal_cv.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )  # type: ignore[arg-type]
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
