"""Cross-field checks over a configuration and its computed result.

Every rule runs on every call. Findings are returned as data; nothing here
raises for a bad configuration.
"""

import dataclasses
import logging
import math
from typing import Iterator, List, Optional, Tuple

from models.configuration import WarehouseConfig
from models.results import (
    CapacityResult, ModuleBayCount, EmpiricalBayCount,
    ValidationFinding, ValidationResult,
)
from config.defaults import (
    MIN_RELIABLE_BAY_COUNT, VNA_MIN_SAFE_AISLE_WIDTH, MIN_MEZZ_CLEAR_HEIGHT,
    FINDING_CONFIGURATION, FINDING_ADVISORY, FINDING_DEGENERATE_INPUT,
)

logger = logging.getLogger(__name__)

_SKIPPED_RESULT_FIELDS = {"validation", "explanation_steps"}


def _iter_numbers(record, prefix: str = "") -> Iterator[Tuple[str, float]]:
    """Yield (dotted path, value) for every numeric field of a dataclass tree."""
    for f in dataclasses.fields(record):
        if f.name in _SKIPPED_RESULT_FIELDS:
            continue
        value = getattr(record, f.name)
        path = f"{prefix}{f.name}"
        if dataclasses.is_dataclass(value):
            yield from _iter_numbers(value, prefix=f"{path}.")
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            yield path, value


def check_rack_height(config: WarehouseConfig, result: CapacityResult) -> Optional[ValidationFinding]:
    if config.clear_height and result.total_rack_height > config.clear_height:
        return ValidationFinding(
            field="levels",
            message=(
                f"Rack height ({result.total_rack_height:.1f} ft) exceeds warehouse clear height "
                f"({config.clear_height} ft). Reduce number of levels."
            ),
            kind=FINDING_CONFIGURATION,
        )
    return None


def check_bay_count(result: CapacityResult, min_bays: int) -> Optional[ValidationFinding]:
    if result.bay_count < min_bays:
        return ValidationFinding(
            field="bay_count",
            message=(
                f"Very low bay count ({result.bay_count}). Consider adjusting rack dimensions "
                f"or warehouse area allocation."
            ),
            kind=FINDING_ADVISORY,
        )
    return None


def check_vna_aisle(config: WarehouseConfig, min_aisle: float) -> Optional[ValidationFinding]:
    if config.is_vna and config.main_aisle_width < min_aisle:
        return ValidationFinding(
            field="main_aisle_width",
            message=(
                f"VNA with aisle width < {min_aisle:g} ft requires specialized equipment and "
                f"safety protocols. Ensure proper clearances."
            ),
            kind=FINDING_ADVISORY,
        )
    return None


def check_mezzanine_height(config: WarehouseConfig, min_height: float) -> Optional[ValidationFinding]:
    if config.mezz_clear_height and config.mezz_clear_height < min_height:
        return ValidationFinding(
            field="mezz_clear_height",
            message=(
                f"Mezzanine clear height < {min_height:g} ft may create cramped picking zones. "
                f"Consider increasing height."
            ),
            kind=FINDING_ADVISORY,
        )
    return None


def check_area_overflow(result: CapacityResult) -> Optional[ValidationFinding]:
    areas = result.areas
    if areas.racking_area > areas.total_area:
        if areas.use_direct_area_input:
            return ValidationFinding(
                field="hd_rack_area",
                message="HD rack area plus mezzanine area exceeds total warehouse area. Check inputs.",
                kind=FINDING_CONFIGURATION,
            )
        return ValidationFinding(
            field="percent_racking",
            message="Racking area exceeds total warehouse area. Reduce percentage or check inputs.",
            kind=FINDING_CONFIGURATION,
        )
    return None


def check_degenerate_inputs(config: WarehouseConfig, result: CapacityResult) -> List[ValidationFinding]:
    """Zero divisors and non-finite values that would make the numbers meaningless."""
    findings = []

    def degenerate(field_name: str, message: str):
        findings.append(ValidationFinding(field=field_name, message=message, kind=FINDING_DEGENERATE_INPUT))

    if not result.areas.total_area > 0:
        degenerate("area", "Warehouse area must be positive. Enter an area or both length and width.")

    details = result.bay_count_details
    if isinstance(details, EmpiricalBayCount) and not details.effective_area_per_bay > 0:
        degenerate(
            "aisle_overhead_multiplier",
            "Effective area per bay is zero or negative. Check bay dimensions and aisle overhead multiplier.",
        )
    if isinstance(details, ModuleBayCount):
        if not details.module_length > 0:
            degenerate("main_aisle_width", "Module length is zero or negative. Check bay length, gap and aisle width.")
        if not details.row_pitch > 0:
            degenerate("cross_aisle_width", "Row pitch is zero or negative. Check bay width and cross aisle width.")

    if result.derived.sqft_per_cbm is None:
        degenerate("total_cbm", "Total capacity is zero; sq.ft per CBM is undefined.")
    if result.derived.space_improvement_factor is None:
        degenerate("baseline_cbm", "Baseline CBM is zero; space improvement factor is undefined.")

    for path, value in _iter_numbers(config):
        if not math.isfinite(value):
            degenerate(path, f"Input '{path}' is not a finite number.")
    for path, value in _iter_numbers(result):
        if not math.isfinite(value):
            degenerate(path, f"Computed value '{path}' is not a finite number.")

    return findings


def validate_capacity(
    config: WarehouseConfig,
    result: CapacityResult,
    rule_config: Optional[dict] = None,
) -> ValidationResult:
    """Run all rules and split the findings into blocking errors and warnings."""
    cfg = rule_config or {}
    min_bays = cfg.get("min_reliable_bay_count", MIN_RELIABLE_BAY_COUNT)
    min_vna_aisle = cfg.get("vna_min_safe_aisle_width", VNA_MIN_SAFE_AISLE_WIDTH)
    min_mezz_height = cfg.get("min_mezz_clear_height", MIN_MEZZ_CLEAR_HEIGHT)

    validation = ValidationResult()

    for finding in [
        check_rack_height(config, result),
        check_bay_count(result, min_bays),
        check_vna_aisle(config, min_vna_aisle),
        check_mezzanine_height(config, min_mezz_height),
        check_area_overflow(result),
    ]:
        if finding is None:
            continue
        if finding.kind == FINDING_ADVISORY:
            validation.warnings.append(finding)
        else:
            validation.errors.append(finding)

    validation.errors.extend(check_degenerate_inputs(config, result))

    if validation.errors:
        logger.info(
            "Validation found %d error(s): %s",
            len(validation.errors), ", ".join(e.field for e in validation.errors),
        )
    return validation
