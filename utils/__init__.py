"""
utils package
-------------

Shared helpers for the timing engine: constants from config/constants.json,
catalog loading, clock-time arithmetic, input validation, logging and the
presentation copy used by the API.
"""
