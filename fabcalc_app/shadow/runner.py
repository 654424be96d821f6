"""
Offline shadow comparison of the engine against recorded legacy totals.

A recording is a JSON Lines file, one worksheet per line:

    {"id": "ws-1", "treatment_category": "curtains", "measurements": {...},
     "template": {...}, "fabric": {...}, "options": [...], "old_total": 412.5}

Each record is rebuilt into contracts, calculated, and compared. A record
that cannot be built or calculated is reported as a failure and the batch
carries on.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import orjson

from ..config.defaults import DefaultConfig, get_default_config
from ..data.normalizer import ContractBuilder, parse_number
from ..engine import CalculationEngine
from ..errors import FabricationError, ValidationError
from ..logging.config import get_shadow_logger, log_shadow_comparison
from ..models.categories import normalize_category

logger = get_shadow_logger(__name__)


@dataclass(frozen=True)
class ShadowResult:
    """Comparison outcome of one recorded worksheet."""
    record_id: str
    category: str
    success: bool
    old_total: Optional[float]
    new_total: Optional[float] = None
    diff: Optional[float] = None
    diff_pct: Optional[float] = None
    matched: bool = False
    error: Optional[str] = None


@dataclass(frozen=True)
class ShadowSummary:
    """Aggregate of a shadow batch."""
    total: int
    succeeded: int
    failed: int
    matched: int
    mismatched: int
    max_diff_pct: float

    @property
    def all_matched(self) -> bool:
        return self.failed == 0 and self.mismatched == 0


def load_recordings(path: Union[str, Path]) -> list[dict[str, Any]]:
    """
    Load recorded worksheets from a JSON Lines file.

    Args:
        path: Recording file

    Returns:
        List of worksheet records (blank lines skipped)

    Raises:
        ValidationError: If a line is not a JSON object
    """
    records = []
    with open(path, "rb") as handle:
        for line_number, line in enumerate(handle, start=1):
            if not line.strip():
                continue
            try:
                record = orjson.loads(line)
            except orjson.JSONDecodeError as e:
                raise ValidationError(
                    f"Invalid JSON on line {line_number}: {e}",
                    field=f"line {line_number}",
                    code=ValidationError.INVALID_TYPE,
                )
            if not isinstance(record, dict):
                raise ValidationError(
                    f"Line {line_number} is not a JSON object",
                    field=f"line {line_number}",
                    code=ValidationError.INVALID_TYPE,
                )
            records.append(record)
    return records


class ShadowRunner:
    """
    Runs recorded worksheets through the engine and compares totals.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()
        self.builder = ContractBuilder(self.config)
        self.engine = CalculationEngine(self.config)
        self.tolerance_pct = self.config.shadow.tolerance_pct
        self.categories = {normalize_category(c) for c in self.config.shadow.categories}

    def run(self, records: Iterable[dict[str, Any]]) -> list[ShadowResult]:
        """Compare every record in a compared category; others are skipped."""
        results = []
        for index, record in enumerate(records):
            category = normalize_category(
                record.get("treatment_category") or record.get("treatmentCategory") or record.get("category")
            )
            if category not in self.categories:
                logger.debug("Shadow record skipped", record_id=record.get("id"), category=category)
                continue
            results.append(self.compare(record, category, index))
        return results

    def compare(self, record: dict[str, Any], category: str, index: int = 0) -> ShadowResult:
        """Compare one record against its recorded total."""
        record_id = str(record.get("id") or record.get("surface_id") or f"record_{index}")
        old_total = parse_number(record.get("old_total"))

        if old_total is None:
            return self._failure(record_id, category, None, "Recorded old_total is missing or invalid")

        build = self.builder.build_input(record)
        if not build.success:
            return self._failure(record_id, category, old_total, build.error_msg)

        try:
            result = self.engine.calculate(build.contract)
        except FabricationError as e:
            return self._failure(record_id, category, old_total, str(e))

        new_total = result.total
        diff = abs(new_total - old_total)
        diff_pct = diff / (old_total or 1)
        matched = diff_pct <= self.tolerance_pct

        log_shadow_comparison(
            logger,
            record_id=record_id,
            category=category,
            old_total=old_total,
            new_total=new_total,
            diff_pct=diff_pct,
            matched=matched,
            context=None if matched else {"formula": result.formula_breakdown.summary},
        )

        return ShadowResult(
            record_id=record_id,
            category=category,
            success=True,
            old_total=old_total,
            new_total=new_total,
            diff=diff,
            diff_pct=diff_pct,
            matched=matched,
        )

    def _failure(self, record_id: str, category: str, old_total: Optional[float], reason: str) -> ShadowResult:
        logger.warning("Shadow record failed", record_id=record_id, category=category, error=reason)
        return ShadowResult(
            record_id=record_id,
            category=category,
            success=False,
            old_total=old_total,
            error=reason,
        )


def summarize(results: list[ShadowResult]) -> ShadowSummary:
    """Aggregate shadow results."""
    succeeded = [r for r in results if r.success]
    return ShadowSummary(
        total=len(results),
        succeeded=len(succeeded),
        failed=len(results) - len(succeeded),
        matched=sum(1 for r in succeeded if r.matched),
        mismatched=sum(1 for r in succeeded if not r.matched),
        max_diff_pct=max((r.diff_pct for r in succeeded), default=0.0),
    )
