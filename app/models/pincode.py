# app/models/pincode.py
from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, func


class Pincode(SQLModel, table=True):
	__tablename__ = "pincodes"

	id: Optional[int] = Field(default=None, primary_key=True)
	pincode: str = Field(index=True, unique=True, min_length=6, max_length=6)

	area_name: str
	city_name: str = Field(index=True)
	district_name: Optional[str] = None
	state_name: str = Field(index=True)

	# Delivery availability
	serviceable: bool = Field(default=False, index=True)
	priority: bool = Field(default=False)
	standard: bool = Field(default=True)

	updated_at: Optional[datetime] = Field(
		default=None,
		sa_column=Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
	)
