import logging
import pandas as pd
from sqlmodel import Session, delete

from app.models.pincode import Pincode

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["pincode", "areaname", "cityname", "statename"]
# flag column -> value when the cell is empty
FLAG_DEFAULTS = {"serviceable": False, "priority": False, "standard": True}
TRUE_VALUES = {"true", "yes", "y", "1"}


def parse_flag(value, default: bool) -> bool:
	if value is None or pd.isna(value):
		return default
	return str(value).strip().lower() in TRUE_VALUES


def clean_text(value):
	if value is None or pd.isna(value):
		return None
	text = str(value).strip()
	return text or None


def import_pincodes_csv(session: Session, csv_path: str) -> int:
	"""
	Replaces the pincode table with the contents of a CSV export.
	The export has one row per delivery area, several areas can share a pincode:
	they are merged, a pincode is serviceable if any of its areas is.
	Uses the passed session; commit is left to the caller.
	"""
	logger.info("Importing pincodes from %s", csv_path)

	# 1. Reading (everything as text, pincodes keep their leading zeros)
	df = pd.read_csv(csv_path, dtype=str)
	df.columns = [c.strip().lower() for c in df.columns]
	df = df.rename(columns={"distrcitname": "districtname"})

	missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
	if missing:
		raise ValueError(f"Pincode CSV is missing columns: {', '.join(missing)}")

	# 2. Cleaning
	df["pincode"] = df["pincode"].astype(str).str.strip()
	# blank or whitespace-only names become missing
	for column in ("areaname", "cityname", "districtname", "statename"):
		if column in df.columns:
			df[column] = df[column].map(clean_text)
	valid = df["pincode"].str.fullmatch(r"\d{6}") & df["cityname"].notna() & df["statename"].notna()
	skipped = int((~valid).sum())
	df = df[valid].copy()

	if "districtname" not in df.columns:
		df["districtname"] = None
	for flag, default in FLAG_DEFAULTS.items():
		if flag not in df.columns:
			df[flag] = None
		df[flag] = df[flag].map(lambda v, d=default: parse_flag(v, d))

	# 3. One row per pincode
	merged = df.groupby("pincode", sort=True).agg({
		"areaname": "first",
		"cityname": "first",
		"districtname": "first",
		"statename": "first",
		"serviceable": "any",
		"priority": "any",
		"standard": "any",
	}).reset_index()

	# 4. Clearing
	session.exec(delete(Pincode))

	pincodes = []
	for _, row in merged.iterrows():
		city = clean_text(row["cityname"])
		pincodes.append(Pincode(
			pincode=row["pincode"],
			area_name=clean_text(row["areaname"]) or city,
			city_name=city,
			district_name=clean_text(row["districtname"]) or city,
			state_name=clean_text(row["statename"]),
			serviceable=bool(row["serviceable"]),
			priority=bool(row["priority"]),
			standard=bool(row["standard"]),
		))

	# 5. Saving in batches
	batch_size = 2000
	for i in range(0, len(pincodes), batch_size):
		session.add_all(pincodes[i: i + batch_size])
		# commit is done by the caller
		session.flush()

	if skipped:
		logger.warning("Skipped %d rows without a valid pincode, city or state", skipped)
	logger.info("Imported pincodes: %d", len(pincodes))
	return len(pincodes)
