#!/usr/bin/env python3
# frs_admin/api/v1/routes/health.py

from fastapi import APIRouter
from frs_admin.config.config import settings

router = APIRouter(prefix="", tags=["health"])

@router.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.app_name, "version": settings.app_version}
