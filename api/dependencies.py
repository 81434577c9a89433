"""
Shared FastAPI dependencies for the Image Manipulation Service.
"""

import logging
from typing import Any, Dict

from fastapi import Depends, HTTPException, Query, Request

from core.constants import APIConstants, MetricsConstants
from core.metrics import MetricsBuffer
from core.processor import Processor
from services.manipulator import Manipulator

logger = logging.getLogger(__name__)


class Services:
    """Container for the service instances kept in app state."""

    def __init__(self, processor: Processor, manipulator: Manipulator, metrics: MetricsBuffer):
        self.processor = processor
        self.manipulator = manipulator
        self.metrics = metrics


def get_services(request: Request) -> Services:
    """
    Get service instances from app state.

    Raises:
        HTTPException: If services not initialized
    """
    try:
        return Services(
            processor=request.app.state.processor,
            manipulator=request.app.state.manipulator,
            metrics=request.app.state.metrics,
        )
    except AttributeError as e:
        logger.error(f"Services not initialized in app state: {e}")
        raise HTTPException(
            status_code=500, detail="Internal server error: Services not initialized"
        )


def get_processor(services: Services = Depends(get_services)) -> Processor:
    """Get Processor instance."""
    return services.processor


def get_manipulator(services: Services = Depends(get_services)) -> Manipulator:
    """Get Manipulator instance."""
    return services.manipulator


def get_metrics_buffer(services: Services = Depends(get_services)) -> MetricsBuffer:
    """Get MetricsBuffer instance."""
    return services.metrics


def get_config(request: Request) -> Dict[str, Any]:
    """Get configuration dict from app state."""
    return getattr(request.app.state, "config", {})


def recent_limit(
    limit: int = Query(
        MetricsConstants.DEFAULT_RECENT_LIMIT,
        ge=APIConstants.MIN_LIMIT,
        le=APIConstants.MAX_LIMIT,
        description="Number of observations to return",
    ),
) -> int:
    """Common limit query parameter."""
    return limit
