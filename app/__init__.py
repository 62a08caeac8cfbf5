# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the web application:
# - main.py: App factory, lifespan (database connection), middleware, handlers
# - server.py: uvicorn entry point that binds PORT and logs the listen URL
# - config.py: Environment variable loading, settings and connection strings
# - static.py: Public directory file serving
# - routers/: The "site" and "image" route groups
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================

__version__ = "1.0.0"
