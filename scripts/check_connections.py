#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the store and the configured auth strategy are usable.
Usage: python scripts/check_connections.py
"""
import sys
sys.path.insert(0, '.')

from career_code.core.auth import get_firebase_app
from career_code.core.config import get_settings
from career_code.db.mongodb import test_mongo_connection


def main():
    settings = get_settings()
    print("=" * 50)
    print("CAREER CODE - CONNECTION CHECK")
    print("=" * 50)

    print("\n[1] Testing MongoDB...")
    print(f"    Database: {settings.mongodb_db}")
    if test_mongo_connection():
        print("    ✅ MongoDB: CONNECTED")
    else:
        print("    ❌ MongoDB: FAILED")

    print(f"\n[2] Auth strategy: {settings.auth_strategy}")
    if settings.auth_strategy == "firebase":
        try:
            get_firebase_app(settings)
            print("    ✅ Firebase Admin: INITIALIZED")
        except (OSError, ValueError) as e:
            print(f"    ❌ Firebase Admin: {e}")
    elif settings.jwt_access_secret == "change-this-secret":
        print("    ⚠️  JWT_ACCESS_SECRET is the development default")
    else:
        print("    ✅ JWT secret configured")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
