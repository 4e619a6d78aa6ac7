from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlmodel import Session

from app.api.v1.errors import to_http_error
from app.core.database import get_session
from app.core.exceptions import ShippingError
from app.schemas.calculation import (VolumetricRequest, VolumetricCalcResult, ShipmentRequest,
                                     ShipmentCalculationResponse)
from app.schemas.quote import Quote, Dimensions
from app.schemas.rates import RateTable
from app.services.calculator import calculate_shipping_rate
from app.services.quote import build_quote, quote_filename
from app.services.rate_table import get_rate_table
from app.services.weight import calculate_volumetric_weight
from app.services.zones import resolve_zone

router = APIRouter()


@router.post("/volumetric", response_model=VolumetricCalcResult)
def calculate_volumetric(request: VolumetricRequest):
	"""Volumetric weight (L x B x H / 5000) and chargeable weight."""
	try:
		return calculate_volumetric_weight(request.length, request.breadth, request.height, request.actual_weight)
	except ShippingError as e:
		raise to_http_error(e)


def _calculate_shipment(request: ShipmentRequest, session: Session,
                        rate_table: RateTable) -> ShipmentCalculationResponse:
	# 1. Weight
	weight = calculate_volumetric_weight(request.length, request.breadth, request.height, request.actual_weight)

	# 2. Zone (explicit or from the pincode pair)
	zone = request.zone or resolve_zone(session, request.from_pincode, request.to_pincode)

	# 3. Price
	breakdown = calculate_shipping_rate(weight.chargeable_weight, zone, request.service_type, rate_table)
	return ShipmentCalculationResponse(weight=weight, breakdown=breakdown)


@router.post("/calculate", response_model=ShipmentCalculationResponse)
def calculate_shipment(
		request: ShipmentRequest,
		session: Session = Depends(get_session),
		rate_table: RateTable = Depends(get_rate_table)
):
	"""
	Full calculation:
	1. Chargeable weight from dimensions and actual weight
	2. Zone from the request or from the pincodes
	3. Itemized rate (base, fuel surcharge, GST)
	"""
	try:
		return _calculate_shipment(request, session, rate_table)
	except ShippingError as e:
		raise to_http_error(e)


@router.post("/quote", response_model=Quote)
def export_quote(
		request: ShipmentRequest,
		session: Session = Depends(get_session),
		rate_table: RateTable = Depends(get_rate_table)
):
	"""Same as /calculate, returned as a downloadable quote valid for 30 days."""
	try:
		result = _calculate_shipment(request, session, rate_table)
	except ShippingError as e:
		raise to_http_error(e)

	quote = build_quote(
		result.weight,
		result.breakdown,
		Dimensions(length=request.length, breadth=request.breadth, height=request.height),
		from_pincode=request.from_pincode,
		to_pincode=request.to_pincode,
	)
	return JSONResponse(
		content=quote.model_dump(mode="json", by_alias=True),
		headers={"Content-Disposition": f'attachment; filename="{quote_filename(quote)}"'},
	)
