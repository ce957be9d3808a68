import os

from admin_portal.auth import get_password_hash
from admin_portal.database import SessionLocal, engine, Base
from admin_portal.models import Category, Setting, User

# Create tables
Base.metadata.create_all(bind=engine)

db = SessionLocal()

admin_email = os.environ.get("ADMIN_EMAIL", "admin@example.com")
admin_password = os.environ.get("ADMIN_PASSWORD", "change-me-please")

# First admin account
admin = db.query(User).filter(User.email == admin_email).first()
if admin is None:
    admin = User(
        email=admin_email,
        username=admin_email.split("@")[0],
        role="admin",
        status="active",
        hashed_password=get_password_hash(admin_password),
    )
    db.add(admin)

# Default categories
categories = [
    Category(name="Development", category_for="blog"),
    Category(name="Design", category_for="blog"),
    Category(name="Web", category_for="portfolio"),
    Category(name="Consulting", category_for="service"),
]
existing = {(c.name, c.category_for) for c in db.query(Category).all()}
new_categories = [c for c in categories if (c.name, c.category_for) not in existing]

# Site settings
if db.query(Setting).count() == 0:
    db.add(Setting(site_name="Admin Portal", mode="system"))

db.add_all(new_categories)
db.commit()

print("Database seeded successfully!")
print(f"  - Admin account: {admin_email}")
print(f"  - {len(new_categories)} categories")

db.close()
