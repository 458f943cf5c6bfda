from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.dtos import CreateProductDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService
from modules.users.dtos import CreateUserDTO
from modules.users.exceptions import UserAlreadyExists
from modules.users.repositories.django_repository import UserDjangoRepository
from modules.users.services import UserService

SEED_USERS = [
    ("Ana Ruiz", "ana@example.com", 34),
    ("Bruno Lima", "bruno@example.com", 28),
    ("Carla Mendes", "carla@example.com", None),
    ("Daniel Costa", "daniel@example.com", 45),
    ("Elena Torres", "elena@example.com", 51),
    ("Fernando Vidal", "fernando@example.com", 19),
]

SEED_PRODUCTS = [
    ("27in Monitor", "Electronics", Decimal("1299.90")),
    ("Mechanical Keyboard", "Electronics", Decimal("399.90")),
    ("Gaming Mouse", "Electronics", Decimal("249.90")),
    ("14in Laptop", "Electronics", Decimal("3999.00")),
    ("Headset", "Electronics", Decimal("299.90")),
    ("Office Desk", "Furniture", Decimal("899.00")),
    ("Ergonomic Chair", "Furniture", Decimal("1499.00")),
    ("Bookshelf", "Furniture", Decimal("699.00")),
    ("A4 Paper", "Office", Decimal("29.90")),
    ("Blue Pen", "Office", Decimal("4.90")),
    ("Notebook", "Office", Decimal("19.90")),
    ("Stapler", "Office", Decimal("39.90")),
    ("Sticky Notes", "Office", Decimal("12.90")),
    ("Calculator", "Office", Decimal("89.90")),
]


class Command(BaseCommand):
    help = "Seed database with development users and products."

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        products_created = self._seed_products()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"products={products_created}"
            )
        )

    def _seed_users(self) -> int:
        self.stdout.write("Creating users...")
        service = UserService(repository=UserDjangoRepository())
        created = 0
        for name, email, age in SEED_USERS:
            try:
                service.create_user(CreateUserDTO(name=name, email=email, age=age))
            except UserAlreadyExists:
                continue
            created += 1
        self.stdout.write(self.style.SUCCESS("Creating users... Done!"))
        return created

    def _seed_products(self) -> int:
        self.stdout.write("Creating products...")
        service = ProductService(repository=ProductDjangoRepository())
        created = 0
        for name, category, price in SEED_PRODUCTS:
            if Product.objects.filter(name=name).exists():
                continue
            service.create_product(
                CreateProductDTO(
                    name=name,
                    description=f"{category} item",
                    price=price,
                    # Some rows land under the default low-stock threshold.
                    stock=random.randint(0, 60),
                    category=category,
                )
            )
            created += 1
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return created
