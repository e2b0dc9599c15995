"""Business logic services.

Services hold the demo data and the transformations routes call into.
They are deterministic and accept their inputs explicitly.
"""
