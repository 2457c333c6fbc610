"""
core
----

Core timing engine components:

- models:
  Immutable records for profiles, rules, constraint variants and the
  schedule output.

- ScheduleState, DaySlots & PlacedItem:
  Encapsulate the anchors of the day and the working records of one
  scheduling run.

- ConstraintManager:
  Register one handler per constraint variant and apply them in order.

- tags:
  Category labels shared by the rule and profile catalogs.
"""
