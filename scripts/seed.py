#!/usr/bin/env python3
"""
Seed the database with categories and an admin account.

Usage:
    python scripts/seed.py            # seed (existing categories are kept)
    python scripts/seed.py --clear    # wipe users, products and categories first
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from app.core.config import config
from app.core.security import get_password_hasher
from app.db.mongodb import CATEGORIES, PRODUCTS, USERS, Database
from app.models.user import Role
from app.repositories.category import CategoryRepository
from app.repositories.user import UserRepository

CATEGORIES_SEED = [
    {"name": "electronics", "subcategories": ["phones", "laptops", "tablets", "accessories"]},
    {"name": "clothing", "subcategories": ["men", "women", "kids"]},
    {"name": "home", "subcategories": ["kitchen", "furniture", "decor"]},
    {"name": "books", "subcategories": ["fiction", "non-fiction", "education"]},
]


class MarketplaceSeeder:
    def __init__(self):
        self.database = Database(config.mongodb_url, config.mongodb_database)
        self.admin_email = os.getenv("SEED_ADMIN_EMAIL", "admin@example.com")
        self.admin_password = os.getenv("SEED_ADMIN_PASSWORD", "Admin12345")

    async def clear_data(self):
        print("Clearing existing data...")
        for name in (USERS, PRODUCTS, CATEGORIES):
            result = await self.database.collection(name).delete_many({})
            print(f"Deleted {result.deleted_count} documents from '{name}'")

    async def seed_categories(self):
        repository = CategoryRepository(self.database.collection(CATEGORIES))
        created = 0
        for category in CATEGORIES_SEED:
            if await repository.get_by_name(category["name"]):
                print(f"Category '{category['name']}' already exists, skipping")
                continue
            await repository.create(category["name"], category["subcategories"])
            created += 1
        print(f"Seeded {created} categories")

    async def seed_admin(self):
        repository = UserRepository(self.database.collection(USERS), get_password_hasher())
        if await repository.get_by_email(self.admin_email):
            print(f"Admin '{self.admin_email}' already exists, skipping")
            return
        await repository.create(
            name="Administrator",
            email=self.admin_email,
            password=self.admin_password,
            role=Role.ADMIN,
        )
        print(f"Created admin account '{self.admin_email}'")

    async def run(self, clear: bool):
        await self.database.connect()
        try:
            if clear:
                await self.clear_data()
            await self.seed_categories()
            await self.seed_admin()
            print("Seeding completed successfully!")
        finally:
            await self.database.close()


def main():
    parser = argparse.ArgumentParser(description="Seed the marketplace database")
    parser.add_argument("--clear", action="store_true", help="delete existing data before seeding")
    args = parser.parse_args()

    try:
        asyncio.run(MarketplaceSeeder().run(clear=args.clear))
    except Exception as error:
        print(f"Error seeding data: {error}")
        sys.exit(1)


if __name__ == "__main__":
    main()
