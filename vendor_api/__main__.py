"""Run the API with uvicorn: ``python -m vendor_api``.

``lifespan="on"`` makes a failed MongoDB bootstrap abort the process before
the listening socket is bound.
"""

import uvicorn

from vendor_api.core.config import settings


def main() -> None:
    uvicorn.run(
        "vendor_api.main:app",
        host=settings.host,
        port=settings.port,
        lifespan="on",
    )


if __name__ == "__main__":
    main()
