"""
models/ - Domain Models
=======================
Plain dataclasses and enums describing stored records.
"""
