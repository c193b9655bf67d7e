from models.configuration import WarehouseConfig
from models.results import (
    AreaBreakdown, BayGeometry, ModuleBayCount, EmpiricalBayCount, BayCountDetails,
    BayVolume, MezzanineVolume, PalletPositions, DerivedMetrics,
    BoQLineItem, BillOfQuantities, ValidationFinding, ValidationResult, CapacityResult,
)
