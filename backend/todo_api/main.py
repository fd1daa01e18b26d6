from fastapi import FastAPI
from .core.config import settings
from .core.logging_setup import setup_logging
from .api import health, todos

app = FastAPI(title=settings.APP_NAME)
app.include_router(health.router, prefix=settings.API_PREFIX)
app.include_router(todos.router,  prefix=settings.API_PREFIX)

@app.on_event("startup")
def on_startup():
    setup_logging(settings.LOG_LEVEL)
