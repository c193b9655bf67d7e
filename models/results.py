from dataclasses import dataclass, field
from typing import List, Optional, Union

from config.defaults import METHOD_MODULE, METHOD_EMPIRICAL


@dataclass
class AreaBreakdown:
    total_area: float
    racking_area: float
    mezz_area: float
    hd_area: float
    staging_area: float            # negative when racking % > 100 in percentage mode
    use_direct_area_input: bool = False


@dataclass
class BayGeometry:
    bay_footprint: float           # sq.ft
    total_rack_height: float       # ft
    volume_per_level_cuft: float


@dataclass
class ModuleBayCount:
    """Exact row/column layout: two back-to-back bays plus one aisle per module."""
    bays_per_row: int
    number_of_rows: int
    total_bays: int
    module_length: float
    row_pitch: float
    method: str = METHOD_MODULE

    @property
    def bay_count(self) -> int:
        return self.total_bays


@dataclass
class EmpiricalBayCount:
    """Area-based estimate using an aisle overhead multiplier."""
    effective_area_per_bay: float
    bay_count: int
    method: str = METHOD_EMPIRICAL


BayCountDetails = Union[ModuleBayCount, EmpiricalBayCount]


@dataclass
class BayVolume:
    volume_per_level_cuft: float
    volume_per_bay_cuft: float
    volume_per_bay_cbm: float


@dataclass
class MezzanineVolume:
    mezz_total_cuft: float
    mezz_total_cbm: float
    mezz_levels: int


@dataclass
class PalletPositions:
    pallets_per_level: int
    total_pallet_positions: int
    is_overridden: bool = False


@dataclass
class DerivedMetrics:
    sqft_per_cbm: Optional[float]              # None when total CBM is zero
    space_improvement_factor: Optional[float]  # None when baseline is zero
    extra_cbm: float


@dataclass
class BoQLineItem:
    key: str
    quantity: int
    description: str


@dataclass
class BillOfQuantities:
    upright_pairs: BoQLineItem
    beam_pairs: BoQLineItem
    decking_panels: BoQLineItem
    anchor_bolts: BoQLineItem
    row_spacers: BoQLineItem
    column_protectors: BoQLineItem

    def line_items(self) -> List[BoQLineItem]:
        return [
            self.upright_pairs, self.beam_pairs, self.decking_panels,
            self.anchor_bolts, self.row_spacers, self.column_protectors,
        ]


@dataclass
class ValidationFinding:
    field: str
    message: str
    kind: str  # "configuration", "advisory", "degenerate_input"


@dataclass
class ValidationResult:
    errors: List[ValidationFinding] = field(default_factory=list)
    warnings: List[ValidationFinding] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass
class CapacityResult:
    areas: AreaBreakdown
    bay_geometry: BayGeometry
    bay_count: int
    bay_count_details: BayCountDetails
    bay_volume: BayVolume
    mezzanine: MezzanineVolume
    total_rack_cbm: float
    total_cbm: float
    baseline_cbm: float
    pallets: PalletPositions
    derived: DerivedMetrics
    boq: BillOfQuantities
    validation: ValidationResult = field(default_factory=ValidationResult)
    explanation_steps: List[str] = field(default_factory=list)

    @property
    def total_rack_height(self) -> float:
        return self.bay_geometry.total_rack_height

    @property
    def volume_per_bay_cbm(self) -> float:
        return self.bay_volume.volume_per_bay_cbm

    @property
    def mezz_cbm(self) -> float:
        return self.mezzanine.mezz_total_cbm

    @property
    def total_pallet_positions(self) -> int:
        return self.pallets.total_pallet_positions

    @property
    def method(self) -> str:
        return self.bay_count_details.method
