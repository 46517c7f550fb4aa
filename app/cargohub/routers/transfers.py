from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response

from app.cargohub.core.deps import get_transfer_ledger
from app.cargohub.core.error_catalog import AppError, ErrorCatalog
from app.cargohub.db.models import Transfer, TransferItem
from app.cargohub.repos.transfers import SortDirection, TransferQueryFilters, TransferSortField
from app.cargohub.schemas.common import MAX_DB_INT, RecordId
from app.cargohub.schemas.errors import CONFLICT_RESPONSE, NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from app.cargohub.schemas.transfers import (
    TransferCreateRequest,
    TransferItemResponse,
    TransferResponse,
    TransferUpdateRequest,
)
from app.cargohub.services.transfers import TransferLedger, TransferLineInput, TransferPatch


router = APIRouter()

# request field -> TransferPatch field
_PATCH_FIELDS = {
    "reference": "reference",
    "transfer_from": "from_location_id",
    "transfer_to": "to_location_id",
    "transfer_status": "status",
}


def _transfer_item_response(line: TransferItem) -> TransferItemResponse:
    return TransferItemResponse(item_id=line.item_uid, amount=line.amount)


def _transfer_response(transfer: Transfer) -> TransferResponse:
    return TransferResponse(
        id=transfer.id,
        reference=transfer.reference,
        transfer_from=transfer.from_location_id,
        transfer_to=transfer.to_location_id,
        transfer_status=transfer.status,
        created_at=transfer.created_at,
        updated_at=transfer.updated_at,
        items=[_transfer_item_response(line) for line in transfer.items],
    )


def _patch_from_request(payload: TransferUpdateRequest) -> TransferPatch:
    present = payload.model_dump(exclude_unset=True)
    return TransferPatch(**{_PATCH_FIELDS[name]: value for name, value in present.items()})


@router.get("/transfers", response_model=list[TransferResponse], responses=VALIDATION_RESPONSE)
def list_transfers(
    sort_by: TransferSortField = Query("id"),
    sort_dir: SortDirection = Query("asc"),
    reference: str | None = Query(None),
    transfer_status: str | None = Query(None),
    transfer_to: int | None = Query(None, le=MAX_DB_INT),
    transfer_from: int | None = Query(None, le=MAX_DB_INT),
    ledger: TransferLedger = Depends(get_transfer_ledger),
):
    filters = TransferQueryFilters(
        reference=reference,
        status=transfer_status,
        from_location_id=transfer_from,
        to_location_id=transfer_to,
        sort_by=sort_by,
        sort_dir=sort_dir,
    )
    return [_transfer_response(transfer) for transfer in ledger.list_transfers(filters)]


@router.get("/transfers/{transfer_id}", response_model=TransferResponse, responses=NOT_FOUND_RESPONSE)
def get_transfer(transfer_id: RecordId, ledger: TransferLedger = Depends(get_transfer_ledger)):
    transfer = ledger.get_transfer_by_id(transfer_id)
    if transfer is None:
        raise AppError(ErrorCatalog.TRANSFER_NOT_FOUND, details={"transfer_id": transfer_id})
    return _transfer_response(transfer)


@router.get(
    "/transfers/{transfer_id}/items",
    response_model=list[TransferItemResponse],
    responses=NOT_FOUND_RESPONSE,
)
def list_transfer_items(transfer_id: RecordId, ledger: TransferLedger = Depends(get_transfer_ledger)):
    return [_transfer_item_response(line) for line in ledger.list_transfer_items(transfer_id)]


@router.post(
    "/transfers",
    response_model=TransferResponse,
    status_code=201,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def create_transfer(payload: TransferCreateRequest, ledger: TransferLedger = Depends(get_transfer_ledger)):
    transfer = ledger.create_transfer(
        reference=payload.reference,
        from_location_id=payload.transfer_from,
        to_location_id=payload.transfer_to,
        status=payload.transfer_status,
        items=[TransferLineInput(item_uid=line.item_id, amount=line.amount) for line in payload.items],
    )
    return _transfer_response(transfer)


@router.put(
    "/transfers/{transfer_id}",
    status_code=204,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def update_transfer(
    transfer_id: RecordId,
    payload: TransferUpdateRequest,
    ledger: TransferLedger = Depends(get_transfer_ledger),
):
    ledger.update_transfer(transfer_id, _patch_from_request(payload))
    return Response(status_code=204)


@router.delete("/transfers/{transfer_id}", status_code=204)
def delete_transfer(transfer_id: RecordId, ledger: TransferLedger = Depends(get_transfer_ledger)):
    ledger.delete_transfer(transfer_id)
    return Response(status_code=204)


@router.post(
    "/transfers/{transfer_id}/commit",
    status_code=204,
    responses={**NOT_FOUND_RESPONSE, **CONFLICT_RESPONSE},
)
def commit_transfer(transfer_id: RecordId, ledger: TransferLedger = Depends(get_transfer_ledger)):
    ledger.commit_transfer(transfer_id)
    return Response(status_code=204)
