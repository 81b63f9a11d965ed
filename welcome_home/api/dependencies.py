"""Dependency injection for FastAPI endpoints"""

from datetime import date
from typing import Optional

from fastapi import Query, Request

from welcome_home.config import settings
from welcome_home.domain.defaults import IdFactory, uuid_fee_id


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_reference_date(
    today: Optional[date] = Query(None, description="Reference date (defaults to the server's today)"),
) -> date:
    """Injected 'now' for holding-deposit expiry and default move-in dates"""
    return today or date.today()


def get_id_factory() -> IdFactory:
    """Provide the fee id generator for this request"""
    return lambda: uuid_fee_id(settings.fee_id_prefix)
