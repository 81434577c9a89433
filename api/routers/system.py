"""
System API Router - Status and metrics monitoring
"""

import logging
import time
from datetime import datetime
from typing import Optional

import psutil
from fastapi import APIRouter, Depends, Query, Request

from api.dependencies import get_metrics_buffer, recent_limit
from api.exceptions import safe_endpoint

logger = logging.getLogger(__name__)

router = APIRouter()

# Track start time
START_TIME = time.time()


@router.get("/status")
@safe_endpoint
async def get_status(metrics=Depends(get_metrics_buffer)) -> dict:
    """Get system status"""
    # Get memory usage
    process = psutil.Process()
    memory_info = process.memory_info()

    # Get system memory
    virtual_memory = psutil.virtual_memory()

    stats = metrics.get_statistics()

    return {
        "status": "healthy",
        "uptime": time.time() - START_TIME,
        "memory_usage": {
            "process_mb": memory_info.rss / 1024 / 1024,
            "system_percent": virtual_memory.percent,
            "available_mb": virtual_memory.available / 1024 / 1024,
        },
        "metrics_buffer": {
            "usage": stats["buffer_usage"],
            "max": stats["buffer_max"],
            "total_updates": stats["total_updates"],
        },
    }


@router.get("/metrics")
@safe_endpoint
async def get_metrics(
    scope: Optional[str] = Query(None, description="Only include this scope"),
    metrics=Depends(get_metrics_buffer),
) -> dict:
    """Get aggregated duration statistics per metric name"""
    return metrics.get_statistics(scope=scope)


@router.get("/metrics/recent")
@safe_endpoint
async def get_recent_metrics(
    name: Optional[str] = Query(None, description="Filter by metric name"),
    scope: Optional[str] = Query(None, description="Filter by scope"),
    limit: int = Depends(recent_limit),
    metrics=Depends(get_metrics_buffer),
) -> list:
    """Get the most recent metric observations, newest first"""
    records = metrics.get_recent(limit=limit, name=name, scope=scope)
    return [r.to_dict() for r in records]


@router.post("/metrics/clear")
@safe_endpoint
async def clear_metrics(metrics=Depends(get_metrics_buffer)) -> dict:
    """Clear all buffered metric observations"""
    metrics.clear()
    return {"success": True}


@router.get("/config")
@safe_endpoint
async def get_config(request: Request) -> dict:
    """Get current configuration"""
    return request.app.state.config


@router.get("/health")
async def health_check() -> dict:
    """Simple health check"""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}
