# app/services/zones.py
from sqlmodel import Session, select

from app.core.exceptions import UnknownPincode, PincodeNotServiceable
from app.models.pincode import Pincode

LOCAL = "local"
REGIONAL = "regional"
NATIONAL = "national"


def _same(a: str | None, b: str | None) -> bool:
	return bool(a and b) and a.strip().lower() == b.strip().lower()


def lookup_pincode(session: Session, pincode: str) -> Pincode:
	code = str(pincode).strip()
	item = session.exec(select(Pincode).where(Pincode.pincode == code)).first()
	if not item:
		raise UnknownPincode(code)
	return item


def resolve_zone(session: Session, from_pincode: str, to_pincode: str) -> str:
	"""
	Pricing zone for a pincode pair:
	- same city  -> local
	- same state -> regional
	- otherwise  -> national
	The destination has to be serviceable.
	"""
	origin = lookup_pincode(session, from_pincode)
	destination = lookup_pincode(session, to_pincode)

	if not destination.serviceable:
		raise PincodeNotServiceable(destination.pincode)

	if _same(origin.state_name, destination.state_name):
		if _same(origin.city_name, destination.city_name):
			return LOCAL
		return REGIONAL
	return NATIONAL
