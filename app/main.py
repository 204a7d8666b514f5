import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import settings
from app.database import Base, SessionLocal, engine
from app.routers import auth, profile, price, transaction, estimate
# Import models to ensure tables are created
from app.models import user as user_model, profile as profile_model, transaction as transaction_model, scrap_rate as scrap_rate_model
from app.services.pricing_service import seed_scrap_rates

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="ScrapCart API", debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.CORS_ORIGINS.split(",")],
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

def first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    error = errors[0]
    if error.get("type") == "json_invalid":
        return "Invalid JSON body"
    if error.get("type") == "missing" and tuple(error.get("loc", ())) == ("body",):
        return "Request body is required"
    ctx = error.get("ctx") or {}
    if "error" in ctx:
        # ValueError raised by one of our validators
        return str(ctx["error"])
    return error.get("msg", "Invalid request")

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = first_validation_message(exc)
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"detail": message})

Base.metadata.create_all(bind=engine)
with SessionLocal() as db:
    seed_scrap_rates(db)

app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(price.router)
app.include_router(transaction.router)
app.include_router(estimate.router)

@app.get("/health")
def health():
    return {"status": "ok", "environment": settings.ENVIRONMENT}
