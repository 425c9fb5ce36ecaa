#!/usr/bin/env python3
"""
Database Initialization Script
Run once after cloning to create the schema and default data.
"""
import sys
from pathlib import Path

# Add project directory to path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Initialize database with default data"""
    print("=" * 60)
    print("HRD Management API - Database Initialization")
    print("=" * 60)

    # Import after ensuring path is set
    from hrd_api.config import settings
    from hrd_api.database import init_db, SessionLocal
    from hrd_api.models.init_data import init_default_data
    from hrd_api.models.generate_dummy_data import generate_dummy_data

    print(f"\n🔨 Creating database tables ({settings.database_url})...")
    init_db()
    print("✅ Database schema created successfully")

    print("\n📊 Initializing default data...")
    db = SessionLocal()
    try:
        init_default_data(db)
        print("✅ Default data initialized")

        # Ask user if they want to generate dummy data
        response = input("\n❓ Generate dummy employees? (y/n) [default: n]: ").strip().lower()
        if response == 'y':
            generate_dummy_data(db)
        else:
            print("⏭️  Skipping dummy data generation")

    except Exception as e:
        print(f"❌ Error during initialization: {e}")
        db.rollback()
        sys.exit(1)
    finally:
        db.close()

    print("\n" + "=" * 60)
    print("🎉 Database initialization completed!")
    print("=" * 60)
    print("\n📝 Next steps:")
    print("   1. Configure .env file with your settings")
    print(f"   2. Run: uvicorn hrd_api.main:app --reload --host 0.0.0.0 --port {settings.port}")
    print(f"   3. Access: http://localhost:{settings.port}/docs")
    print("\n👤 Default admin account:")
    print("   Username: admin")
    print("   Password: admin123")
    print("=" * 60)


if __name__ == "__main__":
    main()
