"""Liveness and process statistics endpoints"""
import os
import platform
import sys
import time

import psutil
from fastapi import APIRouter, Depends

from ...config import Settings
from ...models.response import CpuUsage, HealthResponse, MemoryUsage, StatsResponse
from ...utils.helpers import utc_timestamp
from ..dependencies import get_app_settings

router = APIRouter(tags=["system"])

_started_at = time.monotonic()


def uptime() -> float:
    """Seconds since the process imported the application"""
    return round(time.monotonic() - _started_at, 3)


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        timestamp=utc_timestamp(),
        uptime=uptime(),
        environment=settings.environment,
    )


@router.get("/stats", response_model=StatsResponse)
async def stats():
    """Process statistics"""
    process = psutil.Process(os.getpid())
    memory = process.memory_info()
    times = process.cpu_times()
    return StatsResponse(
        uptime=uptime(),
        memory=MemoryUsage(rss=memory.rss, vms=memory.vms),
        cpu=CpuUsage(user=times.user, system=times.system),
        platform=sys.platform,
        python_version=platform.python_version(),
        pid=os.getpid(),
        timestamp=utc_timestamp(),
    )
