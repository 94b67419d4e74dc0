"""Services package — all business logic lives here, never in routers.

Rule: routers call services, services call repositories, repositories call the DB.
      No driver calls in routers. No FastAPI imports in services.
"""
