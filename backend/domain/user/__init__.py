"""User domain module.

Local user records keyed by the identity provider subject, profile data
and the denormalized social counters.
"""
