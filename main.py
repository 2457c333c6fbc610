from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from api.schedule import router as schedule_router
from api.catalog import router as catalog_router
from api.healthcheck import router as healthcheck_router
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from fastapi.openapi.utils import get_openapi
from dotenv import load_dotenv
from utils.loader import load_item_profiles, load_rule_catalog
from utils.logger import get_logger
import os
import secrets

load_dotenv()
logger = get_logger(__name__)

# env
API_KEY = os.getenv("API_KEY")
CORS_ALLOW_ORIGINS = [o for o in os.getenv("CORS_ALLOW_ORIGINS", "").split(",") if o]
ALLOWED_HOSTS = [h for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h] or ["*"]
MAX_BODY_BYTES = int(os.getenv("MAX_BODY_BYTES", "0"))  # 0 = no limit

# Public paths that should NOT require the API key
PUBLIC_EXACT = {
    "/openapi.json",
    "/redoc",
    "/docs",
    "/api/health/check",
}

PUBLIC_PREFIXES = ("/docs/",)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # load the bundled catalogs once, so a broken catalog fails at startup
    rules = load_rule_catalog()
    profiles = load_item_profiles()
    logger.info(
        f"📋 Loaded {len(rules['generic'])} generic rule(s), "
        f"{len(rules['specific'])} specific rule(s), {len(profiles)} profile(s)."
    )
    yield


# app
app = FastAPI(title="Timing Engine API", lifespan=lifespan)

# middlewares
if os.getenv("ENABLE_CORS") == "true":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.add_middleware(TrustedHostMiddleware, allowed_hosts=ALLOWED_HOSTS)


# request size guard
@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    if MAX_BODY_BYTES > 0:
        cl = request.headers.get("content-length")
        if cl and cl.isdigit() and int(cl) > MAX_BODY_BYTES:
            return JSONResponse(status_code=413, content={"detail": "Payload too large"})
    return await call_next(request)


# API key middleware
@app.middleware("http")
async def api_key_guard(request: Request, call_next):
    path = request.url.path

    if request.method == "OPTIONS":
        return await call_next(request)

    if path in PUBLIC_EXACT or path.startswith(PUBLIC_PREFIXES):
        return await call_next(request)

    if not API_KEY:
        logger.warning("API_KEY not set; API key auth is DISABLED (dev mode).")
        return await call_next(request)

    client_key = request.headers.get("x-api-key")
    if not client_key or not secrets.compare_digest(str(client_key), str(API_KEY)):
        return JSONResponse(status_code=401, content={"detail": "Unauthorized"})

    return await call_next(request)


# enable header api key in Swagger
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=app.title,
        version=app.version,
        description="Medication and supplement timing API",
        routes=app.routes,
    )
    schema.setdefault("components", {}).setdefault("securitySchemes", {})[
        "ApiKeyAuth"
    ] = {
        "type": "apiKey",
        "in": "header",
        "name": "x-api-key",
        "description": "Enter your API key",
    }

    for path, methods in schema.get("paths", {}).items():
        for op in methods.values():
            if path in PUBLIC_EXACT:
                op["security"] = []
            else:
                op.setdefault("security", [{"ApiKeyAuth": []}])

    app.openapi_schema = schema
    return app.openapi_schema


app.openapi = custom_openapi

# Register routers
app.include_router(schedule_router, prefix="/api")
app.include_router(catalog_router, prefix="/api")
app.include_router(healthcheck_router, prefix="/api")
