# app/services/weight.py
import math
import logging

from app.core.exceptions import InvalidDimension
from app.schemas.calculation import VolumetricCalcResult

logger = logging.getLogger(__name__)

# cm3 per kg, fixed by the published shipping policy
VOLUMETRIC_DIVISOR = 5000


def round2(value: float) -> float:
	"""
	Rounds to 2 decimals, half away from zero.
	Built-in round() is banker's rounding: round(0.125, 2) == 0.12, here 0.13.
	"""
	return math.copysign(math.floor(abs(value) * 100 + 0.5) / 100, value)


def _is_positive_number(value) -> bool:
	if isinstance(value, bool) or not isinstance(value, (int, float)):
		return False
	return math.isfinite(value) and value > 0


def calculate_volumetric_weight(length: float, breadth: float, height: float,
                                actual_weight: float) -> VolumetricCalcResult:
	"""
	Volumetric weight = L x B x H / 5000 (cm -> kg).
	Chargeable weight is whichever is higher: actual or volumetric.
	"""
	inputs = {"length": length, "breadth": breadth, "height": height, "actual_weight": actual_weight}
	invalid = [name for name, value in inputs.items() if not _is_positive_number(value)]
	if invalid:
		logger.info("Rejected volumetric calculation, invalid %s", ", ".join(invalid))
		raise InvalidDimension(f"Must be a number greater than zero: {', '.join(invalid)}")

	volumetric_weight = round2(length * breadth * height / VOLUMETRIC_DIVISOR)
	# actual weight is taken as entered, only the max is rounded
	chargeable_weight = round2(max(actual_weight, volumetric_weight))

	return VolumetricCalcResult(
		volumetric_weight=volumetric_weight,
		actual_weight=actual_weight,
		chargeable_weight=chargeable_weight,
	)
