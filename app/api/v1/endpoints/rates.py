# app/api/v1/endpoints/rates.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException

from app.api.v1.errors import to_http_error
from app.core.exceptions import ShippingError, RateTableError
from app.schemas.calculation import RateRequest, CompareRequest, RateCalculation
from app.schemas.rates import RateTable, ServiceTypeInfo, RateTableStatus
from app.services.calculator import calculate_shipping_rate, calculate_all_services
from app.services.rate_table import get_rate_table, rate_table_store

router = APIRouter()


@router.post("/rates/calculate", response_model=RateCalculation)
def calculate_rate(request: RateRequest, rate_table: RateTable = Depends(get_rate_table)):
	"""Itemized rate for an already known chargeable weight."""
	try:
		return calculate_shipping_rate(request.chargeable_weight, request.zone, request.service_type, rate_table)
	except ShippingError as e:
		raise to_http_error(e)


@router.post("/rates/compare", response_model=List[RateCalculation])
def compare_rates(request: CompareRequest, rate_table: RateTable = Depends(get_rate_table)):
	"""Rates of every offered service type, for switching the service without re-entering the parcel."""
	try:
		return calculate_all_services(request.chargeable_weight, request.zone, rate_table)
	except ShippingError as e:
		raise to_http_error(e)


@router.get("/rates/services", response_model=List[ServiceTypeInfo])
def list_services(rate_table: RateTable = Depends(get_rate_table)):
	return [
		ServiceTypeInfo(
			key=key,
			name=rate_table.service_types[key].name,
			delivery_days=rate_table.service_types[key].delivery_days,
			description=rate_table.service_types[key].description,
		)
		for key in rate_table.enabled_services()
	]


@router.get("/rates/zones", response_model=List[str])
def list_zones(rate_table: RateTable = Depends(get_rate_table)):
	return list(rate_table.zones)


@router.post("/rates/reload", response_model=RateTableStatus)
def reload_rates():
	"""
	Re-reads the rate table file.
	If the new file is invalid the current table stays active.
	"""
	try:
		table = rate_table_store.reload()
	except RateTableError as e:
		raise HTTPException(status_code=500, detail=f"Rate table reload failed: {e}")

	return RateTableStatus(
		status="success",
		message=f"Rate table reloaded from {rate_table_store.path.name}",
		zones=list(table.zones),
		service_types=list(table.service_types),
	)
