from .calculation import (VolumetricCalcResult, RateCalculation, VolumetricRequest, RateRequest, CompareRequest,
                          ShipmentRequest, ShipmentCalculationResponse)
from .rates import RateTable, ServiceType, ZoneServiceRate, ServiceTypeInfo, RateTableStatus
from .quote import Quote, QuoteDetails, Dimensions
from .pincode import RemotePincode, PincodeRead, ZoneLookupResponse, SyncStatus

__all__ = ["VolumetricCalcResult", "RateCalculation", "VolumetricRequest", "RateRequest", "CompareRequest",
           "ShipmentRequest", "ShipmentCalculationResponse", "RateTable", "ServiceType", "ZoneServiceRate",
           "ServiceTypeInfo", "RateTableStatus", 'Quote', 'QuoteDetails', 'Dimensions',
           'RemotePincode', 'PincodeRead', 'ZoneLookupResponse', 'SyncStatus']
