import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from course_api.core import config
from course_api.database import init_schema
from course_api.errors import ApiError
from course_api.routes import course_routes, user_routes

logging.basicConfig(level=config.LOG_LEVEL)

config.validate_runtime_config()

app = FastAPI(title='Course Catalog REST API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_database() -> None:
    try:
        init_schema()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL.')


@app.exception_handler(ApiError)
async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.body)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = [
        'Request body must be valid JSON' if error.get('type') == 'json_invalid' else error.get('msg', 'Invalid request')
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={'errors': messages})


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={'message': 'Route Not Found'})
    return JSONResponse(status_code=exc.status_code, content={'message': exc.detail}, headers=exc.headers)


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception('Unhandled error on %s %s', request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={'name': type(exc).__name__, 'message': str(exc)},
    )


@app.get('/')
def root():
    return {'message': 'Welcome to the REST API project!'}


app.include_router(user_routes.router, prefix=config.API_PREFIX)
app.include_router(course_routes.router, prefix=config.API_PREFIX)
