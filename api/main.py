import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from core import config, db
from core.errors import install_error_handlers
from posts import router as posts_router

logging.basicConfig(
    level=config.log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Create the posts table once per process.
    await db.init_db()
    yield


# Trailing slashes are routed directly instead of redirected (see posts.router).
app = FastAPI(lifespan=lifespan, redirect_slashes=False)


@app.middleware("http")
async def answer_options_probe(request: Request, call_next):
    # Bare OPTIONS probes (no CORS request headers) succeed with no body.
    if request.method == "OPTIONS":
        return Response(status_code=200)
    return await call_next(request)


# Added last so it wraps the probe handler and answers real preflights itself.
# The web client may be served from anywhere.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_allow_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)

# Served bare and under the prefix the web client uses (e.g. /api/posts).
app.include_router(posts_router.router, tags=["posts"])
if config.api_prefix():
    app.include_router(posts_router.router, prefix=config.api_prefix(), tags=["posts"])
