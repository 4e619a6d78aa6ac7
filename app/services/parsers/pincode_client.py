import logging
from typing import Dict, List, Optional

import httpx
from sqlmodel import Session, select

from app.core.config import settings
from app.core.exceptions import PincodeSyncError
from app.models.pincode import Pincode
from app.schemas.pincode import RemotePincode

logger = logging.getLogger(__name__)


def merge_areas(records: List[RemotePincode]) -> Dict[str, RemotePincode]:
	"""One entry per pincode; delivery flags are set if any area of the pincode has them."""
	merged: Dict[str, RemotePincode] = {}
	for record in records:
		current = merged.get(record.pincode)
		if current is None:
			merged[record.pincode] = record
			continue
		merged[record.pincode] = current.model_copy(update={
			"serviceable": current.serviceable or record.serviceable,
			"priority": current.priority or record.priority,
			"standard": current.standard or record.standard,
		})
	return merged


class PincodeClient:
	"""Pulls pincode areas from the company backend (paginated /pincodes endpoint)."""

	def __init__(self, base_url: Optional[str] = None, token: Optional[str] = None,
	             page_size: Optional[int] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
		self.base_url = base_url or settings.PINCODE_API_URL
		if not self.base_url:
			raise ValueError("PINCODE_API_URL is not configured")
		self.token = token if token is not None else settings.PINCODE_API_TOKEN
		self.page_size = page_size or settings.PINCODE_PAGE_SIZE
		self.transport = transport

	def _client(self) -> httpx.AsyncClient:
		headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
		return httpx.AsyncClient(base_url=self.base_url, headers=headers, timeout=30.0,
		                         transport=self.transport)

	async def fetch_pincodes(self) -> List[RemotePincode]:
		records = []
		page = 1
		async with self._client() as client:
			while True:
				response = await client.get("/pincodes", params={"page": page, "limit": self.page_size})
				response.raise_for_status()
				try:
					payload = response.json()
					items = payload.get("data") or []
					records.extend(RemotePincode.model_validate(item) for item in items)
					has_next = bool((payload.get("pagination") or {}).get("hasNext"))
				except (ValueError, AttributeError, TypeError) as e:
					# ValidationError and JSONDecodeError are both ValueErrors
					raise PincodeSyncError(f"Malformed pincode data on page {page}: {e}") from e

				if not items or not has_next:
					break
				page += 1

		logger.info("Fetched %d pincode areas in %d pages", len(records), page)
		return records

	async def sync_pincodes(self, session: Session) -> Dict[str, int]:
		records = merge_areas(await self.fetch_pincodes())
		created = 0
		updated = 0

		for code, record in records.items():
			fields = {
				"area_name": record.areaname,
				"city_name": record.cityname,
				"district_name": record.districtname or record.cityname,
				"state_name": record.statename,
				"serviceable": record.serviceable,
				"priority": record.priority,
				"standard": record.standard,
			}

			existing = session.exec(select(Pincode).where(Pincode.pincode == code)).first()
			if existing:
				for key, value in fields.items():
					setattr(existing, key, value)
				session.add(existing)
				updated += 1
			else:
				session.add(Pincode(pincode=code, **fields))
				created += 1

		session.commit()
		logger.info("Pincode sync finished: %d created, %d updated", created, updated)
		return {"created": created, "updated": updated, "total": len(records)}
