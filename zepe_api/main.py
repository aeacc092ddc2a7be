# zepe_api/main.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from zepe_api.api.routers import payroll
from zepe_api.core.config import get_settings
from zepe_api.schemas.payroll import HealthResponse

settings = get_settings()

# --- Initialisation de l'application FastAPI ---
app = FastAPI(title="API Zepe - acompte et solde")

# --- Configuration CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
    max_age=3600,
)

app.include_router(payroll.router)


@app.get("/health", response_model=HealthResponse)
def health():
    return {"status": "ok"}
