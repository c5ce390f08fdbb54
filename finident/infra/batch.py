"""Batch validation: many inputs of one kind, results in input order.

Pure and order-preserving, so callers may split a large batch into
chunks and validate them on separate workers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import final

from finident.core.normalize import normalize
from finident.core.validation import ValidationResult
from finident.dispatch import IdentifierKind, validate

log = logging.getLogger(__name__)


@final
@dataclass(frozen=True, slots=True)
class BatchItem:
    input: str | None
    result: ValidationResult
    normalized: str


@final
@dataclass(frozen=True, slots=True)
class BatchSummary:
    total: int
    valid: int
    invalid: int

    @property
    def all_valid(self) -> bool:
        return self.invalid == 0


def validate_batch(
    kind: IdentifierKind,
    inputs: Iterable[str | None],
    country_code: str | None = None,
) -> tuple[tuple[BatchItem, ...], BatchSummary]:
    items = tuple(
        BatchItem(input=raw, result=validate(kind, raw, country_code), normalized=normalize(raw))
        for raw in inputs
    )
    valid = sum(1 for item in items if item.result.is_valid)
    summary = BatchSummary(total=len(items), valid=valid, invalid=len(items) - valid)
    log.info(
        "Validated %d %s inputs: %d valid, %d invalid",
        summary.total, kind.value, summary.valid, summary.invalid,
    )
    return items, summary


def invalid_items(items: Iterable[BatchItem]) -> tuple[BatchItem, ...]:
    return tuple(item for item in items if not item.result.is_valid)
