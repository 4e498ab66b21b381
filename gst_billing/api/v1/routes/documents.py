# gst_billing/api/v1/routes/documents.py
"""
Totals computation for invoices, quotations, delivery challans and sales
debit notes. Nothing is stored; callers persist the returned totals with
the document and recompute whenever its items change.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from gst_billing.api.v1.envelope import camelize, ok
from gst_billing.api.v1.schemas.documents import AmountInWordsRequest, DocumentTotalsRequest
from gst_billing.domain.errors import TaxEngineError
from gst_billing.domain.services.amount_in_words import amount_in_words
from gst_billing.domain.services.place_of_supply import supply_context_from_parties
from gst_billing.domain.services.totals_aggregator import compute_document_totals

logger = logging.getLogger("api.v1.documents")

router = APIRouter(prefix="/documents", tags=["Documents"])


@router.post("/totals", response_model=dict)
async def document_totals(body: DocumentTotalsRequest):
    """Compute line, charge and document totals, tax split and amount in words."""
    try:
        supply = supply_context_from_parties(**body.party_fields())
        result = compute_document_totals(body.to_domain(supply))
    except TaxEngineError as exc:
        logger.warning("Totals rejected for %s: %s", body.document_type.value, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    return ok(data=camelize(result.to_dict()))


@router.post("/amount-in-words", response_model=dict)
async def document_amount_in_words(body: AmountInWordsRequest):
    """Amount in words, Indian numbering system."""
    try:
        words = amount_in_words(body.amount)
    except TaxEngineError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return ok(data={"amountInWords": words})
