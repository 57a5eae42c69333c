from __future__ import annotations

import logging

from staging_planner.errors import EntryBuildError, ErrorKind
from staging_planner.models import Case, Entry, LooseEntry, PackedEntry, RecordDraft
from staging_planner.rounding import ceil_whole, pounds_to_grams

logger = logging.getLogger(__name__)

PACKED = "Packed"
LOOSE = "Loose"


def check_bare_validity(draft: RecordDraft) -> None:
    """Raise for the first missing field every entry needs."""
    if draft.id is None or draft.id <= 0:
        raise EntryBuildError(ErrorKind.MISSING_ID)
    if not draft.fnsku:
        raise EntryBuildError(ErrorKind.MISSING_FNSKU)
    if draft.pack_type is None:
        raise EntryBuildError(ErrorKind.MISSING_PACK_TYPE)
    if draft.units is None:
        raise EntryBuildError(ErrorKind.MISSING_UNITS)


def build_packed(draft: RecordDraft) -> PackedEntry:
    case_qt = draft.case_qt
    if not case_qt:
        raise EntryBuildError(ErrorKind.MISSING_CASE_QT)
    if draft.units % case_qt != 0:
        raise EntryBuildError(ErrorKind.NON_DIVISIBLE_CASE_QT)
    if draft.case_weight is None or draft.case_weight <= 0:
        raise EntryBuildError(ErrorKind.MISSING_PACKED_WEIGHT)
    dims = [draft.case_length, draft.case_width, draft.case_height]
    if not all(dim is not None and dim > 0 for dim in dims):
        raise EntryBuildError(ErrorKind.MISSING_PACKED_DIMENSIONS)
    case = Case.from_dims(
        [ceil_whole(dim) for dim in dims],
        gram_weight=pounds_to_grams(draft.case_weight),
    )
    return PackedEntry(
        id=draft.id,
        fnsku=draft.fnsku,
        units=draft.units,
        per_case=case_qt,
        case=case,
    )


def build_loose(draft: RecordDraft) -> LooseEntry:
    if not draft.staging_group:
        raise EntryBuildError(ErrorKind.MISSING_GROUP)
    if draft.unit_weight is None or draft.unit_weight <= 0:
        raise EntryBuildError(ErrorKind.MISSING_UNIT_WEIGHT)
    return LooseEntry(
        id=draft.id,
        fnsku=draft.fnsku,
        units=draft.units,
        gram_weight=pounds_to_grams(draft.unit_weight),
        group=draft.staging_group,
    )


def build_entry(draft: RecordDraft) -> Entry:
    """Validate a draft and build the entry variant its pack type names.

    Checks run in a fixed order and the first failure is raised as an
    EntryBuildError, so the same draft always reports the same kind.
    Pack type matching is exact: "packed" or "LOOSE" are rejected.
    """
    check_bare_validity(draft)
    if draft.pack_type == PACKED:
        return build_packed(draft)
    if draft.pack_type == LOOSE:
        return build_loose(draft)
    logger.debug("unrecognized pack type %r for fnsku %s", draft.pack_type, draft.fnsku)
    raise EntryBuildError(ErrorKind.INVALID_PACK_TYPE)
