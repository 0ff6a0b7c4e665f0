# csv_dashboard/main.py

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from csv_dashboard import __version__, config
from csv_dashboard.routers import csv_files_router, visuals_router

config.configure_logging()
logger = logging.getLogger(__name__)

# ---------------------------------------------------------
# APP INIT
# ---------------------------------------------------------

app = FastAPI(title="CSV Dashboard API", version=__version__)

logger.info("Allowed CORS origins: %s", config.CORS_ALLOWED_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def all_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ---------------------------------------------------------
# ROUTERS
# ---------------------------------------------------------

app.include_router(csv_files_router)
app.include_router(visuals_router)


@app.get("/")
def root():
    return {"message": "CSV Dashboard API running."}


def run() -> None:
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    run()
