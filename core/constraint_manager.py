from typing import Callable, Dict, Iterable
from core.models import AppliedConstraint, CONSTRAINT_TYPES
from core.state import PlacedItem, ScheduleState

# handler(state, placed_item, applied_constraint) -> None
ConstraintHandler = Callable[[ScheduleState, PlacedItem, AppliedConstraint], None]


class ConstraintManager:
    def __init__(self, state: ScheduleState):
        self.state = state
        self.handlers: Dict[type, ConstraintHandler] = {}

    def add_handler(self, constraint_type: type, handler: ConstraintHandler):
        """Register the handler for one constraint variant."""
        if constraint_type not in CONSTRAINT_TYPES:
            raise TypeError(f"Unknown constraint type: {constraint_type.__name__}")
        self.handlers[constraint_type] = handler

    def check_exhaustive(self):
        """Every constraint variant must have exactly one handler."""
        missing = [t.__name__ for t in CONSTRAINT_TYPES if t not in self.handlers]
        if missing:
            raise TypeError(f"No handler registered for: {', '.join(missing)}")

    def apply_all(self, item: PlacedItem, constraints: Iterable[AppliedConstraint]):
        """Apply the item's constraints in order."""
        for ac in constraints:
            self.handlers[type(ac.constraint)](self.state, item, ac)
