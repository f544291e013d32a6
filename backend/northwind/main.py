# backend/northwind/main.py

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

import northwind.models  # noqa: F401  (registers every table on Base.metadata)
from northwind.api.auth_routes import router as auth_router
from northwind.api.category_routes import router as category_router
from northwind.api.customer_routes import router as customer_router
from northwind.api.deps_auth import get_db
from northwind.api.shipper_routes import router as shipper_router
from northwind.api.supplier_routes import router as supplier_router
from northwind.api.user_routes import router as user_router
from northwind.core.config import get_settings
from northwind.core.database import Base, SessionLocal, engine
from northwind.core.errors import NorthwindError
from northwind.core.logging import setup_logging
from northwind.core.seed import seed_admin_if_empty

settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    setup_logging(settings)
    if settings.AUTO_CREATE_SCHEMA:
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_admin_if_empty(db, settings)
    finally:
        db.close()

    yield


app = FastAPI(title=settings.APP_NAME, version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["Authorization", "Content-Type"],
)


@app.exception_handler(NorthwindError)
async def northwind_error_handler(_request: Request, exc: NorthwindError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
app.include_router(user_router, prefix="/api/users", tags=["users"])
app.include_router(category_router, prefix="/api/categories", tags=["categories"])
app.include_router(supplier_router, prefix="/api/suppliers", tags=["suppliers"])
app.include_router(customer_router, prefix="/api/customers", tags=["customers"])
app.include_router(shipper_router, prefix="/api/shippers", tags=["shippers"])


@app.get("/api/health")
def health(db: Session = Depends(get_db)):
    db.execute(text("SELECT 1"))
    return {"status": "ok"}
