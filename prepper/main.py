import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from prepper.core import config
from prepper.core.errors import AppError
from prepper.database import get_store
from prepper.routes import admin_routes, auth_routes, quiz_routes
from prepper.seed import seed_database

logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

logger = logging.getLogger(__name__)

app = FastAPI(title='Prepper Career Quiz API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)


@app.exception_handler(AppError)
async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error('%s %s failed: %s', request.method, request.url.path, exc.message, exc_info=exc)
        return JSONResponse(status_code=exc.status_code, content={'error': 'Server error'})
    return JSONResponse(status_code=exc.status_code, content={'error': exc.message})


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={'error': exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={'error': 'Invalid request body'})


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception('Unhandled error on %s %s', request.method, request.url.path)
    return JSONResponse(status_code=500, content={'error': 'Server error'})


@app.on_event('startup')
def initialize_database() -> None:
    config.validate_runtime_config()
    try:
        seed_database(get_store())
    except AppError:
        logger.exception('Database seeding failed. Check DB_FILE and its permissions.')


@app.get('/health')
def health():
    return {'status': 'OK', 'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')}


app.include_router(auth_routes.router, prefix='/auth')
app.include_router(quiz_routes.router, prefix='/quiz')
app.include_router(admin_routes.router, prefix='/admin')
