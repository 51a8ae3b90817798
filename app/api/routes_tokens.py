"""
Token ownership and metadata API routes
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.schemas.token import TransferRequest, BaseUriUpdate
from app.services.attendance_service import AttendanceService
from app.services.metadata_service import MetadataService
from app.services.token_service import TokenService
from app.utils.security import get_caller, rate_limit_check, get_client_ip
from app.utils.responses import success_response, rate_limit_error

router = APIRouter()

@router.get("/tokens/last-id")
async def get_last_token_id(
    request: Request,
    db: Session = Depends(get_db)
):
    """Id of the most recently issued token, 0 if none"""
    if not rate_limit_check(get_client_ip(request)):
        raise rate_limit_error()

    return success_response(
        message="Last token id retrieved",
        data={"last_token_id": TokenService.get_last_token_id(db)}
    )

@router.get("/tokens/total")
async def get_total_nfts(
    request: Request,
    db: Session = Depends(get_db)
):
    """Number of tokens ever issued"""
    if not rate_limit_check(get_client_ip(request)):
        raise rate_limit_error()

    return success_response(
        message="Token total retrieved",
        data={"total": AttendanceService.get_total_nfts(db)}
    )

@router.get("/tokens/{token_id}/owner")
async def get_owner(
    token_id: int,
    request: Request,
    db: Session = Depends(get_db)
):
    """Current owner of a token, or null if it was never issued"""
    if not rate_limit_check(get_client_ip(request)):
        raise rate_limit_error()

    return success_response(
        message="Token owner retrieved",
        data={"owner": TokenService.get_owner(db, token_id)}
    )

@router.get("/tokens/{token_id}/uri")
async def get_token_uri(
    token_id: int,
    request: Request,
    db: Session = Depends(get_db)
):
    """Metadata URI for a token"""
    if not rate_limit_check(get_client_ip(request)):
        raise rate_limit_error()

    return success_response(
        message="Token URI retrieved",
        data={"uri": MetadataService.get_token_uri(db, token_id)}
    )

@router.get("/tokens/{token_id}/event")
async def get_event_for_token(
    token_id: int,
    request: Request,
    db: Session = Depends(get_db)
):
    """Event a token was issued for, or null"""
    if not rate_limit_check(get_client_ip(request)):
        raise rate_limit_error()

    return success_response(
        message="Token event retrieved",
        data={"event_id": AttendanceService.get_event_for_token(db, token_id)}
    )

@router.post("/tokens/{token_id}/transfer")
async def transfer(
    token_id: int,
    transfer_data: TransferRequest,
    db: Session = Depends(get_db),
    caller: str = Depends(get_caller)
):
    """Transfer a token from sender to recipient"""
    transferred = TokenService.transfer(
        db,
        caller=caller,
        token_id=token_id,
        sender=transfer_data.sender,
        recipient=transfer_data.recipient
    )

    return success_response(
        message="Token transferred",
        data={"transferred": transferred}
    )

@router.put("/metadata/base-uri")
async def set_base_uri(
    uri_data: BaseUriUpdate,
    db: Session = Depends(get_db),
    caller: str = Depends(get_caller)
):
    """Replace the base URI used for every token"""
    updated = MetadataService.set_base_uri(db, caller=caller, new_uri=uri_data.uri)

    return success_response(
        message="Base URI updated",
        data={"updated": updated}
    )
