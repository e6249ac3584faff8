import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from hopigo.api.v1.calendar import router as calendar_router
from hopigo.core.config import settings
from hopigo.wiring.dependencies import close_availability

LOG_CONTEXT_KEYS = ("provider_id", "date", "request_id", "slot_count", "error")


class ContextFormatter(logging.Formatter):
    """Appends booking context passed via `extra=` as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = " ".join(
            f"{key}={getattr(record, key)}"
            for key in LOG_CONTEXT_KEYS
            if getattr(record, key, None) not in (None, "")
        )
        return f"{base} | {context}" if context else base


def configure_logging(level: str) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)


@asynccontextmanager
async def lifespan(_: FastAPI):
    yield
    await close_availability()


configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="HopiGo Booking Calendar", version="1.0.0", lifespan=lifespan)

app.include_router(calendar_router, prefix="/api/v1", tags=["calendar"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
