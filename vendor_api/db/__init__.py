"""Database package — motor bootstrap, startup result, FastAPI dependency."""
from vendor_api.db.mongo import StartupResult, bootstrap, get_collection

__all__ = ["StartupResult", "bootstrap", "get_collection"]
