from fastapi import FastAPI
from fastapi import Request
from fastapi.middleware.cors import CORSMiddleware
import os
from dotenv import load_dotenv #for .env files
import logging
import uvicorn
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from api import auth, jobs, metrics, profile, statuses # importing routers
from errors import TrackerError

load_dotenv()

logger = logging.getLogger("uvicorn.error")


app = FastAPI(title="Job Tracker API")


frontend_url = os.getenv('FRONTEND_URL', "http://localhost:3000")
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logging.info(f"Allowed frontend URL: {frontend_url}")
origins = [frontend_url]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],  # ALlow all HTTP methods (GET, POST, etc..)
    allow_headers=["*"],
)


@app.exception_handler(TrackerError)
async def tracker_error_handler(request: Request, exc: TrackerError):
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__}: {exc.message}")
    response = JSONResponse(status_code=exc.status_code, content=exc.to_dict())
    response.headers["Access-Control-Allow-Origin"] = frontend_url
    return response


@app.exception_handler(Exception)
async def global_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error: {exc}")
    response = JSONResponse(
        status_code=500,
        content={"detail": "An unexpected error occured"}
    )
#Manually add CORS headers
    response.headers["Access-Control-Allow-Origin"] = frontend_url
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f'Validation Error: {exc}')
    response = JSONResponse(status_code=422, content={"detail": jsonable_errors(exc)})
    response.headers["Access-Control-Allow-Origin"] = frontend_url
    return response


def jsonable_errors(exc: RequestValidationError):
    # pydantic puts the raw exception object in ctx for custom validators
    errors = []
    for err in exc.errors():
        err = dict(err)
        if "ctx" in err:
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
        errors.append(err)
    return errors


#Include routers from separate modules. metrics first: /jobs/summary must win over /jobs/{job_id}
app.include_router(auth.router, prefix="/api", tags=["Auth"])
app.include_router(profile.router, prefix="/api")
app.include_router(statuses.router, prefix="/api")
app.include_router(metrics.router, prefix="/api")
app.include_router(jobs.router, prefix="/api")


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))
    host = os.environ.get("HOST", "localhost")
    uvicorn.run("main:app", host=host, port=port, reload=True)
