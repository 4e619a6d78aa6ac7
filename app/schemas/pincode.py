# app/schemas/pincode.py
import re
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.rates import CamelModel


# Record as returned by the company backend /pincodes endpoint
class RemotePincode(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	pincode: str
	areaname: str
	cityname: str
	# the backend stores the district under a misspelled key
	districtname: Optional[str] = Field(default=None, alias="distrcitname")
	statename: str
	serviceable: bool = False
	priority: bool = False
	standard: bool = True

	@field_validator("pincode", mode="before")
	@classmethod
	def pincode_as_str(cls, value):
		code = str(value).strip().zfill(6)
		if not re.fullmatch(r"\d{6}", code):
			raise ValueError(f"pincode must be six digits, got {value!r}")
		return code


class PincodeRead(CamelModel):
	pincode: str
	area_name: str
	city_name: str
	district_name: Optional[str] = None
	state_name: str
	serviceable: bool
	priority: bool
	standard: bool

	model_config = ConfigDict(from_attributes=True)


class ZoneLookupResponse(CamelModel):
	from_pincode: str
	to_pincode: str
	zone: str


class SyncStatus(CamelModel):
	status: str
	message: str
	total_pincodes: Optional[int] = None
