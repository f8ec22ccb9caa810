# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Prometheus metrics endpoint.

Exposes the application's metrics registry in Prometheus format for
scraping. Only mounted when ``metrics.enabled`` is set.
"""

import logging

from fastapi import APIRouter, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/metrics",
    summary="Prometheus metrics",
    description="Get application metrics in Prometheus format.",
    responses={
        200: {
            "description": "Prometheus metrics",
            "content": {"text/plain": {}},
        },
    },
)
async def get_metrics(request: Request) -> Response:
    """Get Prometheus metrics.

    Returns metrics collected by the application including:
    - Application info (name, version, environment)
    - HTTP request counts and latencies per route

    Returns:
        Response with Prometheus format metrics.
    """
    try:
        metrics = generate_latest(request.app.state.metrics_registry)
    except Exception as e:
        logger.error("Failed to generate metrics: %s", e)
        return Response(
            content=f"# Error generating metrics: {e}\n",
            media_type="text/plain",
            status_code=500,
        )

    return Response(content=metrics, media_type=CONTENT_TYPE_LATEST)
