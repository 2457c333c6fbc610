from core.models import AppliedConstraint
from core.state import PlacedItem, ScheduleState


def warn_rule(state: ScheduleState, item: PlacedItem, ac: AppliedConstraint):
    """Informational rule: never moves the item, always notes and warns."""
    message = ac.constraint.message
    item.notes.append(message)
    affected = [item.canonical_name]
    if ac.other_canonical:
        affected.append(ac.other_canonical)
    state.warn(ac, message, affected)
    state.mark_satisfied(item, ac)
