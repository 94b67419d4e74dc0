"""Vendor Intake API — accepts vendor documents over HTTP and stores them in MongoDB."""
