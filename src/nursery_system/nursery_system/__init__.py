"""Nursery System package.

Feature modules (access, notifications, billing, users) sit on top of shared
core/common/database layers, with thin Flask controllers on the outside.
"""
