# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the gallery:
# - test_config.py: Environment selection and connection strings
# - test_mongo_client.py: MongoConnection lifecycle (driver patched)
# - test_image_service.py: Image CRUD against an in-memory collection
# - test_storage.py: Upload storage and public path mapping
# - test_app.py: HTTP surface - static files, route groups, database outages
# - test_server.py: Port selection and the listening log line
#
# Run tests with: pytest
# =============================================================================
