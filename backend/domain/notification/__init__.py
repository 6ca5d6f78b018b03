"""Notification domain module.

Append-only notifications emitted as side effects of social actions.
"""
