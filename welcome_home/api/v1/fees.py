"""GET /v1/fees/catalog and POST /v1/fees - fee templates and line items"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from welcome_home.api.v1.schemas import CreateFeeRequest, FeeCatalogResponse, FeeItemSchema, FeeTemplateSchema
from welcome_home.api.dependencies import get_id_factory, get_request_id
from welcome_home.domain.defaults import FEE_CATALOG, IdFactory, create_fee_from_template
from welcome_home.domain.exceptions import UnknownFeeTemplateError
from welcome_home.domain.models import FeeCategory
from welcome_home.infrastructure.observability.metrics import fee_items_created_counter

router = APIRouter()


@router.get("/fees/catalog", response_model=FeeCatalogResponse)
def get_fee_catalog(
    category: Optional[FeeCategory] = Query(None, description="Only templates in this category"),
):
    """List fee templates in catalog order"""
    templates = [t for t in FEE_CATALOG if category is None or t.category == category]
    return FeeCatalogResponse(templates=[FeeTemplateSchema.model_validate(t) for t in templates])


@router.post("/fees", response_model=FeeItemSchema, status_code=201)
def create_fee(
    request_body: CreateFeeRequest,
    request: Request,
    id_factory: IdFactory = Depends(get_id_factory),
):
    """Create a new fee line item pre-populated from a catalog template"""
    try:
        fee = create_fee_from_template(
            request_body.name,
            amount=request_body.amount,
            frequency=request_body.frequency,
            id_factory=id_factory,
        )
    except UnknownFeeTemplateError as e:
        logging.warning(f"Unknown fee template: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=404, detail=str(e))

    fee_items_created_counter.labels(category=fee.category.value).inc()
    return FeeItemSchema.model_validate(fee)
