import math
import logging
from typing import List

from app.core.exceptions import InvalidWeight, UnknownZone, UnknownServiceType
from app.schemas.calculation import RateCalculation
from app.schemas.rates import RateTable
from app.services.weight import round2

logger = logging.getLogger(__name__)


def _check_weight(chargeable_weight: float):
	if (isinstance(chargeable_weight, bool) or not isinstance(chargeable_weight, (int, float))
			or not math.isfinite(chargeable_weight) or chargeable_weight <= 0):
		raise InvalidWeight(f"Chargeable weight must be greater than zero, got {chargeable_weight!r}")


def _check_zone(zone: str, rate_table: RateTable):
	if zone not in rate_table.zones:
		logger.info("Rejected rate calculation, unknown zone %r", zone)
		raise UnknownZone(zone)


def calculate_shipping_rate(chargeable_weight: float, zone: str, service_type: str,
                            rate_table: RateTable) -> RateCalculation:
	"""
	Itemized price for one (zone, service type):
	1. Base freight: weight x per-kg rate, but not less than the minimum charge
	2. Fuel surcharge on the base freight
	3. GST on (base + fuel)

	Every field is rounded to 2 decimals before the next one is derived from it.
	"""
	_check_weight(chargeable_weight)
	_check_zone(zone, rate_table)

	zone_rates = rate_table.zones[zone]
	if service_type not in zone_rates:
		logger.info("Rejected rate calculation, %r not offered in zone %r", service_type, zone)
		raise UnknownServiceType(service_type, zone)
	rate = zone_rates[service_type]

	# --- BASE ---
	base_amount = round2(max(rate.minimum_charge, chargeable_weight * rate.per_kg_rate))

	# --- FUEL ---
	fuel_surcharge = round2(base_amount * rate_table.fuel_surcharge_percent)
	subtotal = round2(base_amount + fuel_surcharge)

	# --- GST ---
	gst = round2(subtotal * rate_table.tax_percent)
	total = round2(subtotal + gst)

	return RateCalculation(
		base_amount=base_amount,
		fuel_surcharge=fuel_surcharge,
		subtotal=subtotal,
		gst=gst,
		total=total,
		zone=zone,
		service=service_type,
		delivery_days=rate_table.delivery_days_for(zone, service_type),
	)


def calculate_all_services(chargeable_weight: float, zone: str, rate_table: RateTable) -> List[RateCalculation]:
	"""Prices every enabled service type offered in the zone, in rate table order."""
	_check_weight(chargeable_weight)
	_check_zone(zone, rate_table)

	offered = rate_table.zones[zone]
	return [
		calculate_shipping_rate(chargeable_weight, zone, service_type, rate_table)
		for service_type in rate_table.enabled_services()
		if service_type in offered
	]
