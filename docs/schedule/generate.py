schedule_generate_description = """
Generate a daily medication and supplement timetable from the given items, day times and interaction rules

### Request Body

- `date`: Day of the schedule, `YYYY-MM-DD` (Optional, defaults to today)

- `items`: List of `ScheduleItem` objects, which contain the following information:
    - `canonicalName`: Stable lowercase identifier of the item (`canonical_name` is also accepted)
    - `displayName`: Name shown to the user (`display_name` is also accepted)
    - `dose`: Free-text dose (Optional)
    - `frequency`: Defaults to `daily`

- `wakeTime`: Wake-up time, `HH:MM` (Optional, defaults to `07:00`)

- `meals`: Meal times, `HH:MM` (Optional). Missing meals are derived:
    - `breakfast`: 30 min after waking
    - `lunch`: 4 h after breakfast, not before 12:00
    - `dinner`: 5 h after lunch, not before 18:00

- `profiles`: List of item profiles (Optional, defaults to the built-in catalog)

- `additionalRules`: Interaction rules to apply on top of the built-in rules (Optional)

- `maxSeparationPasses`: Number of separation passes after placement, 1 to 10 (Optional, defaults to 1)

### Response

- `ok`: `true` on success
- `schedule`: `date`, `items` (chronological), `warnings`, `overallConfidence` (0-100) and `disclaimer`
- `summary`: Item count per part of the day (Morning, Afternoon, Evening, Night)
- `confidenceBand`: `high`, `moderate` or `low`

Wake and meal times must be chronological. Invalid times and invalid rules return 400.
"""
