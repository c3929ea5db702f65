"""
Bucket catalog: the fixed reference table of investment archetypes.

Modules
-------
buckets : INVESTMENT_BUCKETS + all_buckets() + get_bucket() + filter_buckets()
          + validate_catalog() - pure data and lookups, no I/O.
"""
