import logging

from fastapi import FastAPI

from clinix.api.v1.admin import router as admin_router
from clinix.api.v1.auth import router as auth_router
from clinix.api.v1.booking import router as booking_router
from clinix.api.v1.home import router as home_router
from clinix.core.config import settings


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("session_id", "service_id", "appointment_id", "step", "username", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=settings.BUSINESS_NAME, version="1.0.0")

app.include_router(home_router, tags=["home"])
app.include_router(auth_router, tags=["auth"])
app.include_router(booking_router, tags=["booking"])
app.include_router(admin_router, tags=["admin"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
