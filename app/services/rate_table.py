# app/services/rate_table.py
import logging
import threading
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from app.core.config import settings
from app.core.exceptions import RateTableError
from app.schemas.rates import RateTable

logger = logging.getLogger(__name__)


def load_rate_table(path: Path) -> RateTable:
	"""Reads and validates the rate table JSON. Nothing is returned half-parsed."""
	path = Path(path)
	if not path.exists():
		raise RateTableError(f"Rate table file {path} not found")

	try:
		table = RateTable.model_validate_json(path.read_text(encoding="utf-8"))
	except ValidationError as e:
		raise RateTableError(f"Invalid rate table {path.name}: {e}") from e

	logger.info("Rate table %s loaded: %d zones, %d service types",
	            path.name, len(table.zones), len(table.service_types))
	return table


class RateTableStore:
	"""
	Holds the current rate table snapshot.
	reload() builds a complete new table first and only then swaps the reference,
	so a running calculation keeps the snapshot it started with.
	"""

	def __init__(self, path: Path):
		self.path = Path(path)
		self._table: Optional[RateTable] = None
		self._lock = threading.Lock()

	def get(self) -> RateTable:
		table = self._table
		if table is None:
			with self._lock:
				if self._table is None:
					self._table = load_rate_table(self.path)
				table = self._table
		return table

	def reload(self) -> RateTable:
		# on error the previous snapshot stays in place
		table = load_rate_table(self.path)
		with self._lock:
			self._table = table
		logger.info("Rate table reloaded from %s", self.path)
		return table


rate_table_store = RateTableStore(settings.RATES_FILE)


def get_rate_table() -> RateTable:
	"""Dependency for FastAPI"""
	return rate_table_store.get()
