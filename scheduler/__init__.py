"""
scheduler
---------

Main scheduling module. Initializes key components:

- `builder`: `generate_schedule`, the single entry point of the engine.
- `solver`: Item placement and the separation passes.

Provides high-level access to core scheduling functionality.
"""
from . import builder, solver
