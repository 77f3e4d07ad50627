from fastapi import APIRouter
from appraisal_api.routers import reference, employees, appraisals

# Centralized API router hub
# Routers are aggregated here and main.py only imports this single hub.
api_router = APIRouter()

api_router.include_router(reference.router)
api_router.include_router(employees.router)
api_router.include_router(appraisals.router)
