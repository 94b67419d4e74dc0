"""Vendor repository: writes Vendor documents to the configured collection."""


from vendor_api.repositories.base import BaseRepository
from vendor_api.schemas.vendor import Vendor


class VendorRepository(BaseRepository):
    async def create(self, vendor: Vendor) -> str:
        return await self.insert(vendor.to_document())
