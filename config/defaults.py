"""Default configuration constants for the Warehouse Capacity Planner."""

# Unit conversion
CUFT_PER_CBM = 35.3147  # cubic feet in one cubic meter

# Standard 1.2m x 1.0m pallet
DEFAULT_PALLET_LENGTH_FT = 3.94
DEFAULT_PALLET_WIDTH_FT = 3.28
DEFAULT_PALLET_FOOTPRINT_SQFT = round(DEFAULT_PALLET_LENGTH_FT * DEFAULT_PALLET_WIDTH_FT, 2)  # 12.92
MIN_PALLETS_PER_LEVEL = 2

# Reference warehouse (values restored by "Load Defaults")
DEFAULT_WAREHOUSE_AREA = 108000.0
DEFAULT_CLEAR_HEIGHT = 45.0
DEFAULT_BASELINE_CBM = 7500.0

# Rack geometry
DEFAULT_BAY_LENGTH = 9.5
DEFAULT_BAY_WIDTH = 3.5
DEFAULT_LEVEL_HEIGHT = 6.0
DEFAULT_LEVELS = 7

# Area allocation (percent of total / percent of racking area)
DEFAULT_PERCENT_RACKING = 60.0
DEFAULT_MEZZ_PERCENT = 30.0

# Aisles
DEFAULT_SMALL_GAP = 1.5
DEFAULT_MAIN_AISLE_WIDTH = 10.0
DEFAULT_AISLE_OVERHEAD_MULTIPLIER = 1.5

# Mezzanine
DEFAULT_MEZZ_CLEAR_HEIGHT = 7.2
DEFAULT_MEZZ_LEVELS = 1

# Aisle presets for the Standard vs VNA comparison
AISLE_PRESETS = {
    "standard": {"main_aisle_width": 10.0, "aisle_overhead_multiplier": 1.5, "is_vna": False},
    "vna": {"main_aisle_width": 6.0, "aisle_overhead_multiplier": 1.2, "is_vna": True},
}
AISLE_WIDTH_OPTIONS = [6.0, 8.0, 10.0, 12.0]

# BoQ safety margins
UPRIGHT_SAFETY = 1.05
BEAM_SAFETY = 1.08
DECKING_SAFETY = 1.10
ANCHOR_SAFETY = 1.05
ANCHORS_PER_UPRIGHT_PAIR = 4
ROW_SPACERS_PER_BAY = 2
COLUMN_PROTECTOR_COVERAGE = 0.30  # share of upright pairs needing corner guards

# Validation thresholds
MIN_RELIABLE_BAY_COUNT = 5
VNA_MIN_SAFE_AISLE_WIDTH = 7.0
MIN_MEZZ_CLEAR_HEIGHT = 6.0

# Finding kinds
FINDING_CONFIGURATION = "configuration"
FINDING_ADVISORY = "advisory"
FINDING_DEGENERATE_INPUT = "degenerate_input"

# Bay count strategies
METHOD_MODULE = "module"
METHOD_EMPIRICAL = "empirical"

# Display
DEFAULT_DECIMALS = 2

# Logging
LOG_LEVEL_ENV_VAR = "WAREHOUSE_PLANNER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
