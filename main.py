import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.cors import CORSMiddleware
from core.config_loader import settings
from core.errors import AppError
from core.logging_config import configure_logging

from organization.router import organization_router
from position.router import position_router
import models_bootstrap 

configure_logging()
log = logging.getLogger("openings.errors")

openapi_tags = [
    {
        "name": "Organizations",
        "description": "Organizations and their open positions",
    },
    {
        "name": "Positions",
        "description": "Position search and maintenance",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]

app = FastAPI(openapi_tags=openapi_tags)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            str(origin).strip("/") for origin in settings.BACKEND_CORS_ORIGINS
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(organization_router, prefix="/api")
app.include_router(position_router, prefix="/api")


@app.exception_handler(AppError)
async def handle_app_error(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

# store failures: log server side, never leak details to the client
@app.exception_handler(SQLAlchemyError)
async def handle_store_error(request: Request, exc: SQLAlchemyError):
    log.error("store error path=%s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


@app.get("/health", tags=['Health Checks'])
def read_root():
    return {"health": "true"}
