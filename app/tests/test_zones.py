import pytest

from app.core.exceptions import UnknownPincode, PincodeNotServiceable
from app.services.zones import resolve_zone, lookup_pincode


@pytest.mark.usefixtures("pincodes")
class TestResolveZone:

	def test_same_city_is_local(self, session):
		# city names differ only in case and trailing space
		assert resolve_zone(session, "110001", "110002") == "local"

	def test_same_state_is_regional(self, session):
		assert resolve_zone(session, "400001", "411001") == "regional"

	def test_other_state_is_national(self, session):
		assert resolve_zone(session, "110001", "560001") == "national"

	def test_unknown_origin(self, session):
		with pytest.raises(UnknownPincode) as exc_info:
			resolve_zone(session, "999999", "110001")
		assert exc_info.value.pincode == "999999"

	def test_unknown_destination(self, session):
		with pytest.raises(UnknownPincode):
			resolve_zone(session, "110001", "123456")

	def test_destination_must_be_serviceable(self, session):
		with pytest.raises(PincodeNotServiceable):
			resolve_zone(session, "110001", "795001")

	def test_origin_need_not_be_serviceable(self, session):
		assert resolve_zone(session, "795001", "110001") == "national"

	def test_lookup_strips_whitespace(self, session):
		assert lookup_pincode(session, " 400001 ").city_name == "Mumbai"
