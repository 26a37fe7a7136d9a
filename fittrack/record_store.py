"""
Per-user storage for calorie, weight and workout entries.

The store is the only place that touches the entry models for API and
import traffic. Every read and write is scoped to a user id, and rows
leave the store as the immutable records the analytics package consumes.
"""
import logging
from dataclasses import dataclass, fields
from decimal import Decimal

from django.forms.models import model_to_dict

from analytics.formatting import to_json_number
from analytics.records import CALORIE, WEIGHT, WORKOUT, as_calendar_date
from calories.forms import CalorieEntryForm
from calories.models import CalorieEntry
from weight.forms import WeightEntryForm
from weight.models import WeightEntry
from workouts.forms import WorkoutEntryForm
from workouts.models import WorkoutEntry

logger = logging.getLogger(__name__)


class RecordStoreError(Exception):
    pass


class RecordNotFound(RecordStoreError):
    pass


class RecordOwnershipError(RecordStoreError):
    pass


class RecordValidationError(RecordStoreError):
    """Raised with the per-field messages of a rejected payload."""

    def __init__(self, errors):
        self.errors = errors
        messages = [
            f"{field}: {' '.join(field_errors)}" if field != '__all__' else ' '.join(field_errors)
            for field, field_errors in errors.items()
        ]
        super().__init__('; '.join(messages) or 'Invalid data')


@dataclass(frozen=True)
class RecordKind:
    name: str
    label: str
    model: type
    form: type


KINDS = {
    CALORIE: RecordKind(CALORIE, 'Calorie entry', CalorieEntry, CalorieEntryForm),
    WEIGHT: RecordKind(WEIGHT, 'Weight entry', WeightEntry, WeightEntryForm),
    WORKOUT: RecordKind(WORKOUT, 'Workout entry', WorkoutEntry, WorkoutEntryForm),
}


def get_kind(name):
    try:
        return KINDS[name]
    except KeyError:
        raise ValueError(f"Unknown record kind: {name}")


@dataclass(frozen=True)
class UserRecords:
    """Everything one user has logged, newest first per kind."""

    calories: list
    weights: list
    workouts: list


def serialize_record(record):
    """JSON-ready dict for a record; dates are ISO strings, decimals are numbers."""
    data = {}
    for f in fields(record):
        if f.name in ('kind', 'user_id'):
            continue
        value = getattr(record, f.name)
        if f.name == 'created_at' and value is not None:
            value = value.isoformat()
        elif f.name == 'date':
            value = value.isoformat()
        elif isinstance(value, Decimal):
            value = to_json_number(value)
        data[f.name] = value
    if record.kind == WORKOUT:
        data['type_label'] = record.type_label
    return data


def _normalize_payload(data):
    if not isinstance(data, dict):
        raise RecordValidationError({'__all__': ['Expected a JSON object']})
    payload = dict(data)
    if isinstance(payload.get('date'), str) and ('T' in payload['date'] or ' ' in payload['date'].strip()):
        try:
            payload['date'] = as_calendar_date(payload['date']).isoformat()
        except ValueError:
            # Leave it for the form to reject with a field error
            pass
    return payload


def _validated_form(kind, payload, instance=None):
    form = kind.form(payload, instance=instance)
    if not form.is_valid():
        errors = {field: [str(message) for message in messages] for field, messages in form.errors.items()}
        raise RecordValidationError(errors)
    return form


class RecordStore:
    """
    CRUD over the entry models, always on behalf of one user.

    Acting on another user's row raises RecordOwnershipError; a missing row
    raises RecordNotFound. Weight entries are unique per user and day, so
    creating one on a day that already has a weight updates that entry.
    """

    def _rows(self, user_id, kind):
        return kind.model.objects.filter(user_id=user_id)

    def _get_row(self, user_id, kind, record_id):
        try:
            row = kind.model.objects.get(pk=record_id)
        except kind.model.DoesNotExist:
            raise RecordNotFound(f"{kind.label} not found")
        if row.user_id != user_id:
            logger.warning(f"User {user_id} attempted to access {kind.name} {record_id} owned by user {row.user_id}")
            raise RecordOwnershipError(f"Not authorized to access this {kind.label.lower()}")
        return row

    def list(self, user_id, kind_name):
        kind = get_kind(kind_name)
        rows = self._rows(user_id, kind).order_by('-date', '-created_at', '-id')
        return [row.to_record() for row in rows]

    def list_in_range(self, user_id, kind_name, start, end):
        """Entries dated within [start, end], oldest first."""
        kind = get_kind(kind_name)
        rows = self._rows(user_id, kind).filter(
            date__gte=as_calendar_date(start),
            date__lte=as_calendar_date(end),
        ).order_by('date', 'created_at', 'id')
        return [row.to_record() for row in rows]

    def get(self, user_id, kind_name, record_id):
        kind = get_kind(kind_name)
        return self._get_row(user_id, kind, record_id).to_record()

    def create(self, user_id, kind_name, data):
        """
        Create an entry from raw field values.

        Returns ``(record, created)``. ``created`` is False only when a
        weight was logged on a day that already had one and that entry
        was updated instead.
        """
        kind = get_kind(kind_name)
        form = _validated_form(kind, _normalize_payload(data))

        if kind.name == WEIGHT:
            cleaned = form.cleaned_data
            entry, created = WeightEntry.objects.update_or_create(
                user_id=user_id,
                date=cleaned['date'],
                defaults={
                    'weight': cleaned['weight'],
                    'notes': cleaned.get('notes') or None,
                },
            )
            if not created:
                logger.info(f"Updated existing weight entry {entry.id} for {cleaned['date']}")
            return entry.to_record(), created

        entry = form.save(commit=False)
        entry.user_id = user_id
        entry.save()
        return entry.to_record(), True

    def update(self, user_id, kind_name, record_id, data):
        """Apply a partial update; fields missing from ``data`` keep their values."""
        kind = get_kind(kind_name)
        row = self._get_row(user_id, kind, record_id)

        payload = model_to_dict(row, fields=kind.form._meta.fields)
        payload.update(_normalize_payload(data))
        form = _validated_form(kind, payload, instance=row)

        if kind.name == WEIGHT:
            clash = WeightEntry.objects.filter(
                user_id=user_id,
                date=form.cleaned_data['date'],
            ).exclude(pk=row.pk).exists()
            if clash:
                raise RecordValidationError({'date': ['A weight entry already exists for this date.']})

        entry = form.save()
        return entry.to_record()

    def delete(self, user_id, kind_name, record_id):
        kind = get_kind(kind_name)
        row = self._get_row(user_id, kind, record_id)
        row.delete()

    def snapshot(self, user_id):
        return UserRecords(
            calories=self.list(user_id, CALORIE),
            weights=self.list(user_id, WEIGHT),
            workouts=self.list(user_id, WORKOUT),
        )

