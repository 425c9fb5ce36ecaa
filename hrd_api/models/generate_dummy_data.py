"""
Generate dummy data for testing
"""
from datetime import date, timedelta
import random
from sqlalchemy.orm import Session
from hrd_api.models.division import Division
from hrd_api.models.employee import Employee

FIRST_NAMES = ["Andi", "Budi", "Citra", "Dewi", "Eko", "Fajar", "Gita", "Hadi", "Indah", "Joko", "Kartika", "Lina"]
LAST_NAMES = ["Pratama", "Saputra", "Wijaya", "Lestari", "Santoso", "Hidayat", "Kusuma", "Nugroho"]
POSITIONS = ["Staff", "Senior Staff", "Supervisor", "Manager"]

# Spread contract end dates over every announcement level
CONTRACT_OFFSETS = [-20, -1, 0, 3, 6, 9, 12, 18, 25, 45, 90, 180, 365, None]


def generate_dummy_data(db: Session, count: int = 24):
    """Generate sample employees across the existing divisions"""

    print("🔄 Generating dummy data...")

    existing_employees = db.query(Employee).count()
    if existing_employees > 0:
        print(f"⚠️  Dummy data already exists ({existing_employees} employees). Skipping...")
        return

    divisions = db.query(Division).all()
    if not divisions:
        print("⚠️  No divisions found. Run init_default_data first.")
        return

    today = date.today()
    for i in range(count):
        first_name = random.choice(FIRST_NAMES)
        last_name = random.choice(LAST_NAMES)
        offset = CONTRACT_OFFSETS[i % len(CONTRACT_OFFSETS)]

        db.add(Employee(
            name=f"{first_name} {last_name}",
            position=random.choice(POSITIONS),
            age=random.randint(21, 58),
            email=f"{first_name.lower()}.{last_name.lower()}{i}@hrd.local",
            phone=f"08{random.randint(1000000000, 9999999999)}",
            address=f"Jl. Merdeka No. {random.randint(1, 200)}",
            contract_end_date=today + timedelta(days=offset) if offset is not None else None,
            status="Active" if random.random() < 0.85 else "Inactive",
            division_id=divisions[i % len(divisions)].id
        ))

    db.commit()
    print(f"✅ Created {count} employees")
