import copy

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from app.models.pincode import Pincode
from app.schemas.rates import RateTable

RATE_TABLE_DATA = {
	"serviceTypes": {
		"standard": {"name": "Standard Service", "deliveryDays": "4-6 days"},
		"priority": {"name": "Priority Service", "deliveryDays": "2-3 days"},
		"express": {"name": "Express Service", "deliveryDays": "Next day", "enabled": False},
	},
	"zones": {
		"national": {
			"standard": {"perKgRate": 50, "minimumCharge": 100},
			"priority": {"perKgRate": 80, "minimumCharge": 160},
			"express": {"perKgRate": 110, "minimumCharge": 220},
		},
		"regional": {
			"standard": {"perKgRate": 40, "minimumCharge": 80, "deliveryDays": "2-4 days"},
			"priority": {"perKgRate": 60, "minimumCharge": 120},
		},
		"local": {
			"standard": {"perKgRate": 30, "minimumCharge": 60},
		},
	},
	"fuelSurchargePercent": 0.10,
	"taxPercent": 0.18,
}


@pytest.fixture
def rate_table_data():
	return copy.deepcopy(RATE_TABLE_DATA)


@pytest.fixture
def rate_table(rate_table_data):
	return RateTable.model_validate(rate_table_data)


@pytest.fixture
def session():
	# In-memory database shared by every connection of the test
	engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
	SQLModel.metadata.create_all(engine)
	with Session(engine) as session:
		yield session
	SQLModel.metadata.drop_all(engine)


@pytest.fixture
def pincodes(session):
	rows = [
		Pincode(pincode="110001", area_name="Connaught Place", city_name="New Delhi", state_name="Delhi",
		        serviceable=True, priority=True),
		Pincode(pincode="110002", area_name="Darya Ganj", city_name="new delhi ", state_name="Delhi",
		        serviceable=True),
		Pincode(pincode="400001", area_name="Fort", city_name="Mumbai", state_name="Maharashtra",
		        serviceable=True, priority=True),
		Pincode(pincode="411001", area_name="Pune Camp", city_name="Pune", state_name="Maharashtra",
		        serviceable=True),
		Pincode(pincode="560001", area_name="MG Road", city_name="Bengaluru", state_name="Karnataka",
		        serviceable=True),
		Pincode(pincode="795001", area_name="Imphal", city_name="Imphal", state_name="Manipur",
		        serviceable=False, standard=False),
	]
	session.add_all(rows)
	session.commit()
	return rows
