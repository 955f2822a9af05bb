"""
repositories/ - Data Access Layer
==================================
Repositories own the SQL for one table each and turn query results
(or their absence) into return values and domain errors.
"""
