"""
Initialize database with default data
"""
from sqlalchemy.orm import Session
from hrd_api.models.user import User
from hrd_api.models.division import Division
from hrd_api.services.auth import get_password_hash

DEFAULT_DIVISIONS = [
    {"name": "IT", "description": "Information Technology", "color": "#3b82f6", "icon": "desktop"},
    {"name": "HR", "description": "Human Resources", "color": "#ec4899", "icon": "people"},
    {"name": "Finance", "description": "Finance Department", "color": "#10b981", "icon": "wallet"},
    {"name": "Marketing", "description": "Marketing Division", "color": "#f59e0b", "icon": "megaphone"},
]


def init_default_data(db: Session):
    """Create the admin account and the default divisions (idempotent)"""

    # Check if admin user already exists
    admin_user = db.query(User).filter(User.username == "admin").first()
    if not admin_user:
        admin_user = User(
            username="admin",
            password_hash=get_password_hash("admin123"),
            email="admin@hrd.local",
            role="admin"
        )
        db.add(admin_user)
        print("✅ Default admin user created (username: admin, password: admin123)")

    existing_divisions = db.query(Division).count()
    if existing_divisions == 0:
        for division_data in DEFAULT_DIVISIONS:
            db.add(Division(**division_data))
        print(f"✅ {len(DEFAULT_DIVISIONS)} divisions created")

    db.commit()
