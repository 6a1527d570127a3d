# app/modules/coverage/router.py
from fastapi import APIRouter, Depends, Query
from pymongo.database import Database

from app.config.database import get_db
from .service import CoverageService

router = APIRouter()

@router.get("/coverage")
async def get_coverage(
    page: int = Query(0, ge=0, description="Página (desde 0)"),
    limit: int = Query(10, ge=0, description="Zonas por página"),
    db: Database = Depends(get_db)
):
    """Listado paginado de zonas de cobertura"""
    service = CoverageService(db)
    return await service.get_areas(page, limit)
