# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - mongo_client.py: Owned MongoDB connection handle (connect / readiness / close)
# - utils.py: Shared utilities (error base class, ObjectId parsing)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.mongo_client import MongoConnection, MongoConnectionError
from lib.utils import ApplicationError, parse_object_id

__all__ = [
    # MongoDB
    "MongoConnection",
    "MongoConnectionError",
    # Utils
    "ApplicationError",
    "parse_object_id",
]
