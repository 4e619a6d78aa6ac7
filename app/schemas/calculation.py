from typing import Optional
from pydantic import Field, model_validator

from app.schemas.rates import CamelModel


# --- Results ---
class VolumetricCalcResult(CamelModel):
	volumetric_weight: float
	actual_weight: float
	chargeable_weight: float


class RateCalculation(CamelModel):
	base_amount: float
	fuel_surcharge: float
	subtotal: float
	gst: float
	total: float
	zone: str
	service: str
	delivery_days: str


# --- Requests ---
# numbers are strict: JSON true or "30" is rejected, not converted
class VolumetricRequest(CamelModel):
	length: float = Field(strict=True, description="cm")
	breadth: float = Field(strict=True, description="cm")
	height: float = Field(strict=True, description="cm")
	actual_weight: float = Field(strict=True, description="kg")


class RateRequest(CamelModel):
	chargeable_weight: float = Field(strict=True)
	zone: str
	service_type: str = "standard"


class CompareRequest(CamelModel):
	chargeable_weight: float = Field(strict=True)
	zone: str


class ShipmentRequest(VolumetricRequest):
	from_pincode: Optional[str] = None
	to_pincode: Optional[str] = None
	# an explicit zone wins over pincode resolution
	zone: Optional[str] = None
	service_type: str = "standard"

	@model_validator(mode="after")
	def check_destination(self):
		if not self.zone and not (self.from_pincode and self.to_pincode):
			raise ValueError("Either zone or both from_pincode and to_pincode are required")
		return self


class ShipmentCalculationResponse(CamelModel):
	weight: VolumetricCalcResult
	breakdown: RateCalculation
