import logging
import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from backend.core import config
from backend.database import Base, engine
from backend.models import post, user
from backend.routes import auth_routes, post_routes

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['GET', 'POST', 'PUT', 'DELETE'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_database() -> None:
    config.validate_runtime_config()
    for directory in (config.PUBLIC_DIR, config.UPLOAD_DIR):
        os.makedirs(directory, exist_ok=True)

    try:
        Base.metadata.create_all(bind=engine, tables=[user.User.__table__, post.Post.__table__])
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL.')


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # ServerErrorMiddleware re-raises afterwards, so the server logs the traceback.
    return JSONResponse(status_code=500, content={'detail': 'Something broke!'})


app.include_router(auth_routes.router)
app.include_router(post_routes.router)

app.mount('/Images', StaticFiles(directory=config.UPLOAD_DIR, check_dir=False), name='images')
app.mount('/static', StaticFiles(directory=config.PUBLIC_DIR, check_dir=False), name='public')


def main() -> None:
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == '__main__':
    main()
