#!/usr/bin/env python3
"""
Script to run the Book Catalog API server.
"""

import uvicorn

from api.config import config
from utilities.config import config as catalog_config


def main():
    """Run the API server."""
    print("🚀 Starting Book Catalog Service")
    print(f"📡 Host: {config.host}")
    print(f"🔌 Port: {config.port}")
    print(f"🌐 Debug: {config.debug}")
    print(f"📚 Database: {catalog_config.mongodb_database}")
    print(f"🔐 Issuer: {config.issuer}")
    print("=" * 50)

    uvicorn.run(
        "api.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level=catalog_config.log_level.lower(),
        access_log=True
    )


if __name__ == "__main__":
    main()
