#!/usr/bin/env python3
"""Delete every stored client state record so all browsers start fresh."""

import sys

from dotenv import load_dotenv

load_dotenv()

from promptforge.database import close_mongo_connection, mongodb_enabled  # noqa: E402
from promptforge.services.persistence_service import clear_all_states  # noqa: E402


def reset_all_states():
    """Remove stored records from MongoDB."""
    try:
        removed = clear_all_states()
    finally:
        close_mongo_connection()

    print(f"\n✅ Removed {removed} stored state record(s).")
    print("   Returning clients will see the landing page with default state.")


if __name__ == "__main__":
    if not mongodb_enabled():
        print("❌ MongoDB is not enabled. Set ENABLE_MONGODB=true in .env")
        sys.exit(1)

    print("🚀 Resetting stored application state...")
    print("   This will DELETE every client's session, credits and saved prompts.")

    confirm = input("\n⚠️  Are you sure? Type 'yes' to continue: ")
    if confirm.lower() == "yes":
        reset_all_states()
    else:
        print("❌ Reset cancelled.")
