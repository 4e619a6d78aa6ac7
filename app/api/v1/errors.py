# app/api/v1/errors.py
from fastapi import HTTPException

from app.core.exceptions import (ShippingError, InvalidDimension, InvalidWeight, UnknownZone, UnknownServiceType,
                                 UnknownPincode, PincodeNotServiceable)

STATUS_CODES = {
	InvalidDimension: 422,
	InvalidWeight: 422,
	UnknownZone: 404,
	UnknownServiceType: 404,
	UnknownPincode: 404,
	PincodeNotServiceable: 409,
}


def to_http_error(error: ShippingError) -> HTTPException:
	status_code = STATUS_CODES.get(type(error), 400)
	return HTTPException(status_code=status_code, detail=str(error))
