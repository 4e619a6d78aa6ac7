import asyncio

import httpx
import pytest
from pydantic import ValidationError
from sqlmodel import select

from app.core.exceptions import PincodeSyncError
from app.models.pincode import Pincode
from app.schemas.pincode import RemotePincode
from app.services.parsers.pincode_client import PincodeClient, merge_areas

BASE_URL = "https://backend.example.com/api/admin"

PAGES = {
	1: {
		"success": True,
		"data": [
			{"pincode": 110001, "areaname": "Connaught Place", "cityname": "New Delhi",
			 "distrcitname": "New Delhi", "statename": "Delhi", "serviceable": False},
			{"pincode": 110001, "areaname": "Janpath", "cityname": "New Delhi",
			 "distrcitname": "New Delhi", "statename": "Delhi", "serviceable": True, "priority": True},
		],
		"pagination": {"currentPage": 1, "hasNext": True},
	},
	2: {
		"success": True,
		"data": [
			{"pincode": "400001", "areaname": "Fort", "cityname": "Mumbai",
			 "statename": "Maharashtra", "serviceable": True},
		],
		"pagination": {"currentPage": 2, "hasNext": False},
	},
}


def make_transport(pages, seen_requests):
	def handler(request: httpx.Request) -> httpx.Response:
		seen_requests.append(request)
		page = int(request.url.params["page"])
		return httpx.Response(200, json=pages[page])

	return httpx.MockTransport(handler)


def test_sync_creates_pincodes(session):
	requests = []
	client = PincodeClient(base_url=BASE_URL, token="secret", page_size=2,
	                       transport=make_transport(PAGES, requests))

	result = asyncio.run(client.sync_pincodes(session))

	assert result == {"created": 2, "updated": 0, "total": 2}
	assert [r.url.params["page"] for r in requests] == ["1", "2"]
	assert requests[0].url.path == "/api/admin/pincodes"
	assert requests[0].url.params["limit"] == "2"
	assert requests[0].headers["Authorization"] == "Bearer secret"

	delhi = session.exec(select(Pincode).where(Pincode.pincode == "110001")).first()
	assert delhi.serviceable is True
	assert delhi.priority is True
	assert delhi.district_name == "New Delhi"

	mumbai = session.exec(select(Pincode).where(Pincode.pincode == "400001")).first()
	# no district in the record -> city
	assert mumbai.district_name == "Mumbai"


def test_sync_updates_existing(session, pincodes):
	requests = []
	client = PincodeClient(base_url=BASE_URL, token="", transport=make_transport(PAGES, requests))

	result = asyncio.run(client.sync_pincodes(session))

	assert result["created"] == 0
	assert result["updated"] == 2
	assert "Authorization" not in requests[0].headers
	# untouched rows stay
	assert session.exec(select(Pincode).where(Pincode.pincode == "560001")).first() is not None


def test_http_error_raised(session):
	transport = httpx.MockTransport(lambda request: httpx.Response(503))
	client = PincodeClient(base_url=BASE_URL, transport=transport)

	with pytest.raises(httpx.HTTPStatusError):
		asyncio.run(client.sync_pincodes(session))


def test_base_url_required():
	with pytest.raises(ValueError):
		PincodeClient(base_url="")


def test_merge_areas_keeps_first_area():
	records = [
		RemotePincode(pincode="110001", areaname="A", cityname="New Delhi", statename="Delhi", standard=False),
		RemotePincode(pincode="110001", areaname="B", cityname="New Delhi", statename="Delhi", serviceable=True),
		RemotePincode(pincode=560001, areaname="C", cityname="Bengaluru", statename="Karnataka"),
	]

	merged = merge_areas(records)

	assert list(merged) == ["110001", "560001"]
	assert merged["110001"].areaname == "A"
	assert merged["110001"].serviceable is True
	assert merged["110001"].standard is True


def test_seven_digit_pincode_rejected():
	with pytest.raises(ValidationError):
		RemotePincode(pincode="1100011", areaname="A", cityname="New Delhi", statename="Delhi")
	with pytest.raises(ValidationError):
		RemotePincode(pincode="11000A", areaname="A", cityname="New Delhi", statename="Delhi")


def test_incomplete_record_aborts_sync(session, pincodes):
	page = {"data": [{"pincode": "110001"}], "pagination": {"hasNext": False}}
	transport = httpx.MockTransport(lambda request: httpx.Response(200, json=page))
	client = PincodeClient(base_url=BASE_URL, transport=transport)

	with pytest.raises(PincodeSyncError):
		asyncio.run(client.sync_pincodes(session))
	# nothing written
	delhi = session.exec(select(Pincode).where(Pincode.pincode == "110001")).first()
	assert delhi.area_name == "Connaught Place"


def test_non_json_body_aborts_sync(session):
	transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>maintenance</html>"))
	client = PincodeClient(base_url=BASE_URL, transport=transport)

	with pytest.raises(PincodeSyncError):
		asyncio.run(client.sync_pincodes(session))
