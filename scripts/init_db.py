import asyncio
import logging
from sqlmodel import Session, select, func

# Engine and settings
from app.core.database import engine, create_db_and_tables
from app.core.config import settings
from app.core.exceptions import RateTableError
from app.models.pincode import Pincode

# Importers (sync) and the backend client (async)
from app.services.importers.import_pincodes import import_pincodes_csv
from app.services.parsers.pincode_client import PincodeClient
from app.services.rate_table import load_rate_table

# Logging setup
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def main():
	logger.info("🚀 Checking database state...")
	create_db_and_tables()

	# 1. Rate table (the API refuses to start without a valid one)
	try:
		load_rate_table(settings.RATES_FILE)
	except RateTableError as e:
		logger.error(f"❌ {e}")

	with Session(engine) as session:
		# Skip initialization if pincodes are already there
		count = session.exec(select(func.count(Pincode.id))).one()

		if count > 0:
			logger.info(f"✅ Database already has {count} pincodes. Skipping initialization.")
			return

		logger.info("⚡ Pincode table is empty. Starting initial import...")

		# 2. Pincodes: local CSV export first, the backend API otherwise
		pincodes_csv = settings.PINCODES_DIR / "pincodes.csv"
		if pincodes_csv.exists():
			import_pincodes_csv(session, str(pincodes_csv))
			session.commit()
		elif settings.PINCODE_API_URL:
			logger.info("🌍 Syncing pincodes from %s...", settings.PINCODE_API_URL)
			asyncio.run(PincodeClient().sync_pincodes(session))
		else:
			logger.error(f"❌ {pincodes_csv} not found and PINCODE_API_URL is not set. Skipping pincodes.")
			return

		logger.info("🏁 Initial import finished!")


if __name__ == "__main__":
	main()
