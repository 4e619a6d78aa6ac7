# app/services/quote.py
from datetime import datetime, timedelta, timezone
from typing import Optional

from app.core.config import settings
from app.schemas.calculation import VolumetricCalcResult, RateCalculation
from app.schemas.quote import Quote, QuoteDetails, Dimensions


def build_quote(weight: VolumetricCalcResult, breakdown: RateCalculation, dimensions: Dimensions,
                from_pincode: Optional[str] = None, to_pincode: Optional[str] = None,
                now: Optional[datetime] = None) -> Quote:
	"""Downloadable quote; valid for QUOTE_VALIDITY_DAYS (30 by default) from generation."""
	generated_at = now or datetime.now(timezone.utc)

	details = QuoteDetails(
		from_pincode=from_pincode,
		to_pincode=to_pincode,
		dimensions=dimensions,
		volumetric_weight=weight.volumetric_weight,
		actual_weight=weight.actual_weight,
		chargeable_weight=weight.chargeable_weight,
		service_type=breakdown.service,
		zone=breakdown.zone,
		delivery_days=breakdown.delivery_days,
	)
	return Quote(
		quote=details,
		breakdown=breakdown,
		generated_at=generated_at,
		valid_until=generated_at + timedelta(days=settings.QUOTE_VALIDITY_DAYS),
	)


def quote_filename(quote: Quote) -> str:
	origin = quote.quote.from_pincode or quote.quote.zone
	destination = quote.quote.to_pincode or quote.quote.service_type
	timestamp_ms = int(quote.generated_at.timestamp() * 1000)
	return f"shipping-quote-{origin}-{destination}-{timestamp_ms}.json"
