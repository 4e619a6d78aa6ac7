# app/api/v1/endpoints/pincodes.py
import httpx
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from app.api.v1.errors import to_http_error
from app.core.database import get_session
from app.core.exceptions import PincodeError, PincodeSyncError
from app.schemas.pincode import PincodeRead, ZoneLookupResponse, SyncStatus
from app.services.parsers.pincode_client import PincodeClient
from app.services.zones import lookup_pincode, resolve_zone

router = APIRouter()


@router.get("/pincodes/{pincode}", response_model=PincodeRead)
def get_pincode(pincode: str, session: Session = Depends(get_session)):
	try:
		return PincodeRead.model_validate(lookup_pincode(session, pincode))
	except PincodeError as e:
		raise to_http_error(e)


@router.get("/zone", response_model=ZoneLookupResponse)
def get_zone(
		from_pincode: str = Query(..., min_length=6, max_length=6),
		to_pincode: str = Query(..., min_length=6, max_length=6),
		session: Session = Depends(get_session)
):
	"""Pricing zone (local / regional / national) for a pincode pair."""
	try:
		zone = resolve_zone(session, from_pincode, to_pincode)
	except PincodeError as e:
		raise to_http_error(e)
	return ZoneLookupResponse(from_pincode=from_pincode, to_pincode=to_pincode, zone=zone)


@router.post("/pincodes/sync", response_model=SyncStatus)
async def sync_pincodes(session: Session = Depends(get_session)):
	"""Pulls the pincode areas from the company backend."""
	try:
		client = PincodeClient()
	except ValueError as e:
		raise HTTPException(status_code=400, detail=str(e))

	try:
		result = await client.sync_pincodes(session)
	except (httpx.HTTPError, PincodeSyncError) as e:
		session.rollback()
		raise HTTPException(status_code=502, detail=f"Pincode sync failed: {e}")

	return SyncStatus(
		status="success",
		message=f"Pincodes synced: {result['created']} created, {result['updated']} updated",
		total_pincodes=result["total"],
	)
