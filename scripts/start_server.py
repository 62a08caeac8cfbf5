#!/usr/bin/env python3
# =============================================================================
# scripts/start_server.py - Web Server Entry Point
# =============================================================================
# Starts the gallery web server from a source checkout.
#
# Usage:
#   python scripts/start_server.py
#
#   # Different port / environment
#   PORT=8080 NODE_ENV=production python scripts/start_server.py
#
# Prerequisites:
#   - MONGO_USER, MONGO_PASSWORD and MONGO_DB set (.env file or environment)
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import settings
from app.server import build_server


def main():
    """Start the web server."""
    print("=" * 60)
    print("IP1 Gallery")
    print("=" * 60)
    print()
    print(f"Environment: {settings.NODE_ENV}")
    print(f"Port:        {settings.PORT}")
    print("Press Ctrl+C to stop")
    print()

    build_server(settings).run()


if __name__ == "__main__":
    main()
