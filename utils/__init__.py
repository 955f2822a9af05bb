"""
utils/ - Shared Helpers
=======================
Logging, domain errors and input validation used by every layer.
"""
