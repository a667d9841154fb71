"""Domain services for rolling recurring entries into a new period."""

from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import date
from enum import Enum
import uuid

from finledger.domain.constants import Category
from finledger.domain.models import LedgerEntry, LedgerSnapshot, RolloverResult
from finledger.domain.periods import period_key, period_start

TemplateKey = tuple[str, Category]
IdFactory = Callable[[LedgerEntry, str], str]


class RolloverPolicy(str, Enum):
    """How rollover decides that a period was already materialized.

    ``PERIOD`` skips the whole period once any income or expense entry is
    dated in it. ``TEMPLATE`` skips only templates that already have an
    entry with the same name and category in the period.
    """

    PERIOD = "period"
    TEMPLATE = "template"


def template_key(entry: LedgerEntry) -> TemplateKey:
    """Return the key identifying an entry's recurring template."""
    return entry.name, entry.category


def resolve_templates(entries: Iterable[LedgerEntry]) -> list[LedgerEntry]:
    """Pick one representative entry per recurring template.

    Only entries flagged ``recurring`` are considered. For each
    ``(name, category)`` key the most recently dated entry wins; among
    entries sharing that date the first one encountered wins.

    Args:
        entries: Entry history to scan.

    Returns:
        list[LedgerEntry]: Representatives in order of first key appearance.
    """
    templates: dict[TemplateKey, LedgerEntry] = {}
    for entry in entries:
        if not entry.recurring:
            continue
        key = template_key(entry)
        current = templates.get(key)
        if current is None or entry.date > current.date:
            templates[key] = entry
    return list(templates.values())


def default_id_factory(template: LedgerEntry, target_period: str) -> str:
    """Build an entry id from the template name, period and a random part."""
    return f"{template.name}_{target_period}_{uuid.uuid4().hex[:12]}"


def rollover(
    snapshot: LedgerSnapshot,
    as_of: date,
    *,
    policy: RolloverPolicy = RolloverPolicy.PERIOD,
    id_factory: IdFactory | None = None,
) -> RolloverResult:
    """Materialize recurring templates into the period containing ``as_of``.

    Each template yields one entry dated on the 1st of the period, flagged
    recurring, with the template's other fields copied. Income templates
    land in ``income``; every other category lands in ``expenses``.
    Existing entries are never edited or removed.

    Args:
        snapshot: Snapshot to roll over.
        as_of: Date whose month is the target period.
        policy: Guard deciding what already counts as materialized.
        id_factory: Optional builder for new entry ids.

    Returns:
        RolloverResult: The input snapshot and no entries when the guard
        fires, otherwise the extended snapshot and the created entries.
    """
    target = period_key(as_of)
    flow = snapshot.flow_entries()
    in_period = [entry for entry in flow if entry.period_key == target]
    if policy is RolloverPolicy.PERIOD and in_period:
        return RolloverResult(snapshot=snapshot, created=[], period_key=target)

    materialized = {template_key(entry) for entry in in_period}
    templates = [
        template
        for template in resolve_templates(flow)
        if template_key(template) not in materialized
    ]
    if not templates:
        return RolloverResult(snapshot=snapshot, created=[], period_key=target)

    make_id = id_factory or default_id_factory
    used_ids = {entry.id for entry in snapshot.entries()}
    first_day = period_start(target)
    created: list[LedgerEntry] = []
    for template in templates:
        new_id = make_id(template, target)
        while new_id in used_ids:
            new_id = default_id_factory(template, target)
        used_ids.add(new_id)
        created.append(
            replace(template, id=new_id, date=first_day, recurring=True)
        )

    income = tuple(e for e in created if e.category is Category.INCOME)
    expenses = tuple(e for e in created if e.category is not Category.INCOME)
    updated = replace(
        snapshot,
        income=snapshot.income + income,
        expenses=snapshot.expenses + expenses,
    )
    return RolloverResult(snapshot=updated, created=created, period_key=target)


__all__ = [
    "RolloverPolicy",
    "template_key",
    "resolve_templates",
    "default_id_factory",
    "rollover",
]
