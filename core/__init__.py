# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the gallery's business logic:
# - models/: Pydantic schemas for images
# - services/: Image CRUD over the MongoDB "images" collection
#
# Route handlers stay thin and delegate here.
# =============================================================================
