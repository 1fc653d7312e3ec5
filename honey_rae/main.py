from fastapi import FastAPI

from honey_rae.api.customers import router as customers_router
from honey_rae.api.employees import router as employees_router
from honey_rae.api.metrics import router as metrics_router
from honey_rae.api.service_tickets import router as service_tickets_router
from honey_rae.config import get_settings
from honey_rae.db.store import reset_store
from honey_rae.observability.logging import configure_logging
from honey_rae.observability.middleware import RequestContextMiddleware


app = FastAPI(title=get_settings().app_name, version="0.1.0")
app.add_middleware(RequestContextMiddleware)
app.include_router(service_tickets_router)
app.include_router(employees_router)
app.include_router(customers_router)
app.include_router(metrics_router)


@app.on_event("startup")
def _startup() -> None:
    settings = get_settings()
    configure_logging(settings.log_level_value, json_logs=settings.log_json)
    reset_store(seed=settings.seed_demo_data)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
