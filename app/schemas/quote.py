# app/schemas/quote.py
from datetime import datetime
from typing import Optional

from app.schemas.calculation import RateCalculation
from app.schemas.rates import CamelModel


class Dimensions(CamelModel):
	length: float
	breadth: float
	height: float


class QuoteDetails(CamelModel):
	from_pincode: Optional[str] = None
	to_pincode: Optional[str] = None
	dimensions: Dimensions
	volumetric_weight: float
	actual_weight: float
	chargeable_weight: float
	service_type: str
	zone: str
	delivery_days: str


class Quote(CamelModel):
	quote: QuoteDetails
	breakdown: RateCalculation
	generated_at: datetime
	valid_until: datetime
