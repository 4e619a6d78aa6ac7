# app/core/exceptions.py


class ShippingError(Exception):
	"""Base class for all errors raised by the shipping services."""


# --- Calculation errors (bad input to a pure calculation) ---
class CalculationError(ShippingError, ValueError):
	pass


class InvalidDimension(CalculationError):
	"""Length, breadth, height or actual weight is missing, non-numeric or not > 0."""


class InvalidWeight(CalculationError):
	"""Chargeable weight is not a positive number."""


class UnknownZone(CalculationError):
	def __init__(self, zone: str):
		self.zone = zone
		super().__init__(f"Unknown zone: {zone!r}")


class UnknownServiceType(CalculationError):
	def __init__(self, service_type: str, zone: str):
		self.service_type = service_type
		self.zone = zone
		super().__init__(f"Service type {service_type!r} is not available for zone {zone!r}")


# --- Rate table loading ---
class RateTableError(ShippingError):
	pass


# --- Pincode sync ---
class PincodeSyncError(ShippingError):
	"""The backend answered with a body or record that cannot be read."""


# --- Pincode lookup ---
class PincodeError(ShippingError, LookupError):
	pass


class UnknownPincode(PincodeError):
	def __init__(self, pincode: str):
		self.pincode = pincode
		super().__init__(f"Pincode {pincode} not found")


class PincodeNotServiceable(PincodeError):
	def __init__(self, pincode: str):
		self.pincode = pincode
		super().__init__(f"Pincode {pincode} is not serviceable")
