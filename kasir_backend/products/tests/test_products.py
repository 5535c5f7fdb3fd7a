# products/tests/test_products.py

from django.db import IntegrityError, transaction
from django.test import TestCase
from rest_framework.test import APIClient

from products.models import Category, Product


class ProductModelTests(TestCase):
    """
    Product model tests.

    GUARANTEES:
    - Products can be created safely
    - Stock can never be stored negative (DB constraint)
    - Soft delete hides the row from active() without removing it
    """

    def test_product_creation(self):
        """A valid product should be created successfully."""
        product = Product.objects.create(name="Indomie Goreng", price=3500, stock=40)

        self.assertEqual(product.name, "Indomie Goreng")
        self.assertEqual(product.stock, 40)
        self.assertIsNone(product.category)

    def test_negative_stock_is_rejected_by_database(self):
        product = Product.objects.create(name="Teh Botol", price=5000, stock=1)

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Product.objects.filter(pk=product.pk).update(stock=-1)

    def test_soft_delete_hides_product(self):
        product = Product.objects.create(name="Kopi Kapal Api", price=2000, stock=5)

        product.soft_delete()

        self.assertTrue(product.is_deleted)
        self.assertFalse(Product.objects.active().filter(pk=product.pk).exists())
        self.assertTrue(Product.objects.filter(pk=product.pk).exists())

    def test_product_string_representation(self):
        """__str__ should be human readable."""
        product = Product.objects.create(name="Aqua 600ml", price=3000, stock=12)

        self.assertIn("Aqua 600ml", str(product))


class CategoryApiTests(TestCase):
    """
    GUARANTEES:
    - Every response uses the {status, message, data} envelope
    - DELETE is a soft delete
    """

    def setUp(self):
        self.client = APIClient()

    def test_create_and_list_categories(self):
        res = self.client.post(
            "/api/category/",
            {"name": "Minuman", "description": "Minuman dingin"},
            format="json",
        )
        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["status"], "success")
        self.assertEqual(res.data["message"], "Category created successfully")
        self.assertEqual(res.data["data"]["name"], "Minuman")
        self.assertIsNone(res.data["data"]["deleted_at"])

        res = self.client.get("/api/category/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["message"], "Categories retrieved successfully")
        self.assertEqual(len(res.data["data"]), 1)

    def test_blank_name_is_rejected(self):
        res = self.client.post("/api/category/", {"name": "   "}, format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["status"], "failed")
        self.assertEqual(res.data["message"], "Invalid request body")

    def test_delete_sets_deleted_at(self):
        category = Category.objects.create(name="Snack")

        res = self.client.delete(f"/api/category/{category.pk}/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["message"], "Category deleted successfully")

        category.refresh_from_db()
        self.assertIsNotNone(category.deleted_at)

        res = self.client.get(f"/api/category/{category.pk}/")
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.data["message"], "Category not found")


class ProductApiTests(TestCase):
    """
    GUARANTEES:
    - CRUD over /api/product/ in envelope form
    - PUT only changes the fields that were sent
    - ?name= filters case-insensitively
    - Non-numeric ids answer 400, unknown ids 404
    """

    def setUp(self):
        self.client = APIClient()
        self.category = Category.objects.create(name="Makanan")
        self.product = Product.objects.create(
            name="Roti Tawar", price=15000, stock=10, category=self.category
        )

    def test_list_products(self):
        Product.objects.create(name="Susu UHT", price=6000, stock=3)

        res = self.client.get("/api/product/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["message"], "Products retrieved successfully")
        self.assertEqual(len(res.data["data"]), 2)
        first = res.data["data"][0]
        self.assertEqual(first["category_id"], self.category.pk)
        self.assertEqual(first["category_name"], "Makanan")

    def test_name_filter(self):
        Product.objects.create(name="Susu UHT", price=6000, stock=3)

        res = self.client.get("/api/product/", {"name": "roti"})

        self.assertEqual(res.status_code, 200)
        names = [p["name"] for p in res.data["data"]]
        self.assertEqual(names, ["Roti Tawar"])

    def test_create_product(self):
        res = self.client.post(
            "/api/product/",
            {"name": "Gula 1kg", "price": 14000, "stock": 20, "category_id": self.category.pk},
            format="json",
        )

        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["message"], "Product created successfully")
        self.assertEqual(res.data["data"]["price"], 14000)
        self.assertTrue(Product.objects.filter(name="Gula 1kg", category=self.category).exists())

    def test_create_rejects_negative_price(self):
        res = self.client.post(
            "/api/product/", {"name": "Rugi", "price": -1, "stock": 1}, format="json"
        )

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["message"], "Invalid request body")

    def test_create_rejects_deleted_category(self):
        self.category.soft_delete()

        res = self.client.post(
            "/api/product/",
            {"name": "Mentega", "price": 9000, "stock": 2, "category_id": self.category.pk},
            format="json",
        )

        self.assertEqual(res.status_code, 400)

    def test_update_is_partial(self):
        res = self.client.put(
            f"/api/product/{self.product.pk}/", {"price": 16000}, format="json"
        )

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["message"], "Product updated successfully")
        self.product.refresh_from_db()
        self.assertEqual(self.product.price, 16000)
        self.assertEqual(self.product.name, "Roti Tawar")
        self.assertEqual(self.product.stock, 10)

    def test_invalid_id_is_bad_request(self):
        res = self.client.get("/api/product/abc/")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["message"], "Invalid Product ID")

    def test_unknown_id_is_not_found(self):
        res = self.client.get("/api/product/99999/")

        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.data["status"], "failed")
        self.assertEqual(res.data["message"], "Product not found")

    def test_delete_hides_product(self):
        res = self.client.delete(f"/api/product/{self.product.pk}/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["message"], "Product deleted successfully")
        self.assertNotIn("data", res.data)

        res = self.client.get("/api/product/")
        self.assertEqual(res.data["data"], [])
