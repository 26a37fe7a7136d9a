"""
Export and import of a user's FitTrack data.

build_export: the raw, unfiltered lists of all three kinds plus the export time.
import_export: re-create the records of an export document for a user.
ImportResult: structured per-kind result of an import.
"""

import logging
from dataclasses import dataclass, field

from django.db import transaction

from analytics.records import CALORIE, WEIGHT, WORKOUT, coerce_number

from .record_store import RecordValidationError, serialize_record

logger = logging.getLogger(__name__)

# Export document key for each record kind
EXPORT_KEYS = {
    CALORIE: 'calories',
    WEIGHT: 'weights',
    WORKOUT: 'workouts',
}

# Store-assigned fields that are never carried into an import
GENERATED_FIELDS = ('id', 'created_at', 'updated_at', 'user_id', 'type_label')

# Optional numbers; malformed values import as None
MACRO_FIELDS = ('protein', 'carbs', 'fat')


def export_filename(exported_at):
    return f"fittrack-export-{exported_at.strftime('%Y-%m-%d')}.json"


def build_export(records, exported_at):
    """Serialize a UserRecords snapshot into the export document."""
    return {
        'calories': [serialize_record(record) for record in records.calories],
        'weights': [serialize_record(record) for record in records.weights],
        'workouts': [serialize_record(record) for record in records.workouts],
        'exportDate': exported_at.isoformat(),
    }


@dataclass
class ImportResult:
    """Structured result from importing one record kind."""

    kind: str
    success: bool = True
    created: int = 0
    updated: int = 0
    skipped: int = 0
    errors: list = field(default_factory=list)

    @property
    def total(self):
        return self.created + self.updated + self.skipped

    @property
    def summary(self):
        if not self.success:
            return f"Failed: {'; '.join(self.errors)}"
        parts = []
        if self.created:
            parts.append(f"{self.created} created")
        if self.updated:
            parts.append(f"{self.updated} updated")
        if self.skipped:
            parts.append(f"{self.skipped} skipped")
        return ", ".join(parts) if parts else "No records processed"


def _import_payload(item):
    payload = {key: value for key, value in item.items() if key not in GENERATED_FIELDS}
    for key in MACRO_FIELDS:
        if key in payload:
            payload[key] = coerce_number(payload[key])
    return payload


def import_export(store, user_id, document, dry_run=False):
    """
    Re-create every record in an export document for ``user_id``.

    Records get fresh ids and timestamps; all other fields are kept as
    exported, except malformed macros which become None. Invalid items
    are skipped and reported. With ``dry_run`` the import runs in full
    and is then rolled back, so the counts match a real run. Returns one
    ImportResult per kind.
    """
    if not isinstance(document, dict):
        raise ValueError("Export document must be a JSON object")

    results = []
    with transaction.atomic():
        for kind, key in EXPORT_KEYS.items():
            result = ImportResult(kind=key)
            items = document.get(key) or []
            if not isinstance(items, list):
                result.success = False
                result.errors.append(f"'{key}' must be a list")
                results.append(result)
                continue

            for index, item in enumerate(items):
                try:
                    if not isinstance(item, dict):
                        raise RecordValidationError({'__all__': ['Expected a JSON object']})
                    payload = _import_payload(item)
                    _, created = store.create(user_id, kind, payload)
                except RecordValidationError as e:
                    result.skipped += 1
                    result.errors.append(f"{key}[{index}]: {e}")
                    continue
                if created:
                    result.created += 1
                else:
                    result.updated += 1

            logger.info(f"{'Dry run: ' if dry_run else ''}Imported {key} for user {user_id}: {result.summary}")
            results.append(result)

        if dry_run:
            # Same writes as a real run, undone when the block exits
            transaction.set_rollback(True)
    return results
