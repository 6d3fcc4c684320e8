from __future__ import annotations

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from modules.products.models import Product

CATALOG = [
    ("Monitor 27\"", "Electronics", Decimal("1299.90")),
    ("Mechanical Keyboard", "Electronics", Decimal("399.90")),
    ("Gaming Mouse", "Electronics", Decimal("249.90")),
    ("Notebook 14\"", "Electronics", Decimal("3999.00")),
    ("Headset", "Electronics", Decimal("299.90")),
    ("Office Desk", "Furniture", Decimal("899.00")),
    ("Ergonomic Chair", "Furniture", Decimal("1499.00")),
    ("Bookshelf", "Furniture", Decimal("699.00")),
    ("A4 Paper", "Office", Decimal("29.90")),
    ("Ballpoint Pens (10)", "Office", Decimal("19.90")),
    ("Stapler", "Office", Decimal("34.90")),
    ("Whiteboard", "Office", Decimal("189.00")),
]


class Command(BaseCommand):
    help = "Seed the catalog with development products (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--with-user",
            action="store_true",
            help="Also create an 'admin' superuser for obtaining API tokens.",
        )

    def handle(self, *args, **options):
        self.stdout.write("Seeding catalog...")

        users_created = self._seed_user() if options["with_user"] else 0
        created = self._seed_products()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"products_created={created}, "
                f"products_total={Product.objects.count()}"
            )
        )

    def _seed_user(self) -> int:
        User = get_user_model()
        if User.objects.filter(username="admin").exists():
            return 0
        User.objects.create_superuser("admin", password="admin123")
        return 1

    def _seed_products(self) -> int:
        created = 0
        for name, category, price in CATALOG:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"description": category, "price": price},
            )
            created += int(was_created)
        return created
