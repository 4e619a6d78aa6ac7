# app/schemas/rates.py
from types import MappingProxyType
from typing import List, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
	"""Base schema: snake_case in Python, camelCase on the wire."""
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# --- Rate table (loaded from JSON, read-only) ---
def _read_only(value):
	if isinstance(value, Mapping):
		return MappingProxyType({key: _read_only(item) for key, item in value.items()})
	return value


def _as_dict(value):
	if isinstance(value, Mapping):
		return {key: _as_dict(item) for key, item in value.items()}
	return value


class ServiceType(CamelModel):
	name: Optional[str] = None
	delivery_days: str
	description: Optional[str] = None
	# disabled services are priced on request but hidden from listings
	enabled: bool = True


class ZoneServiceRate(CamelModel):
	per_kg_rate: float = Field(ge=0)
	minimum_charge: float = Field(ge=0)
	# overrides ServiceType.delivery_days for this zone
	delivery_days: Optional[str] = None


class RateTable(CamelModel):
	# read-only views, shared between concurrent requests
	service_types: Mapping[str, ServiceType]
	zones: Mapping[str, Mapping[str, ZoneServiceRate]]
	# fractions: 0.18 == 18%
	fuel_surcharge_percent: float = Field(ge=0, le=1)
	tax_percent: float = Field(ge=0, le=1)

	@model_validator(mode="after")
	def check_zone_services(self):
		for zone, services in self.zones.items():
			if not services:
				raise ValueError(f"Zone {zone!r} has no service rates")
			unknown = sorted(set(services) - set(self.service_types))
			if unknown:
				raise ValueError(f"Zone {zone!r} uses undeclared service types: {', '.join(unknown)}")
		return self

	@field_validator("service_types", "zones", mode="after")
	@classmethod
	def freeze_mapping(cls, value):
		return _read_only(value)

	@field_serializer("service_types", "zones")
	def mapping_as_dict(self, value):
		return _as_dict(value)

	def delivery_days_for(self, zone: str, service_type: str) -> str:
		rate = self.zones[zone][service_type]
		return rate.delivery_days or self.service_types[service_type].delivery_days

	def enabled_services(self) -> List[str]:
		return [key for key, service in self.service_types.items() if service.enabled]


# --- API responses ---
class ServiceTypeInfo(CamelModel):
	key: str
	name: Optional[str] = None
	delivery_days: str
	description: Optional[str] = None


class RateTableStatus(CamelModel):
	status: str
	message: str
	zones: List[str] = []
	service_types: List[str] = []
