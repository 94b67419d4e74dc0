"""Pydantic schemas package.

Folder intent:
  common.py  — ErrorResponse + HealthResponse
  vendor.py  — Vendor document (request body == stored document) and VendorCreated
"""
