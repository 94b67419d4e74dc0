"""Routers package — HTTP endpoint definitions.

Files:
  vendor.py  — POST /api/vendor

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to vendor_api/services/.
"""
