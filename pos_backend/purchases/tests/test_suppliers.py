# purchases/tests/test_suppliers.py

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from purchases.models import Supplier

User = get_user_model()


class SupplierApiTests(TestCase):
    """
    Supplier master endpoints.

    GUARANTEES:
    - CRUD answers in the envelope
    - Soft delete hides the row and is admin-only
    - Input / id errors use the supplier messages
    """

    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="admin@example.com", password="pass", role="admin")
        self.cashier = User.objects.create_user(email="cashier@example.com", password="pass", role="cashier")
        self.client.force_authenticate(user=self.admin)

        self.supplier = Supplier.objects.create(name="Surat Textiles", contact_info="+91 98000 00001")

    def test_create_supplier(self):
        response = self.client.post(
            "/api/suppliers/",
            {"name": "Jaipur Prints", "contact_info": "jaipur@example.com"},
            format="json",
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["message"], "supplier created")
        self.assertTrue(Supplier.objects.filter(id=response.data["data"]["id"]).exists())

    def test_create_supplier_requires_name(self):
        response = self.client.post("/api/suppliers/", {"contact_info": "x"}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["message"], "invalid input")

    def test_list_is_newest_first_and_skips_deleted(self):
        newer = Supplier.objects.create(name="Newer Supplier")
        gone = Supplier.objects.create(name="Gone Supplier")
        gone.soft_delete()

        response = self.client.get("/api/suppliers/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["message"], "Suppliers fetched successfully")
        ids = [row["id"] for row in response.data["data"]]
        self.assertNotIn(gone.id, ids)
        self.assertLess(ids.index(newer.id), ids.index(self.supplier.id))

    def test_detail(self):
        response = self.client.get(f"/api/suppliers/{self.supplier.id}/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["message"], "Supplier details fetched successfully")
        self.assertEqual(response.data["data"]["name"], "Surat Textiles")

    def test_detail_invalid_id(self):
        response = self.client.get("/api/suppliers/abc/")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["message"], "invalid id")

    def test_detail_missing(self):
        response = self.client.get("/api/suppliers/424242/")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["message"], "supplier not found")

    def test_update(self):
        response = self.client.put(
            f"/api/suppliers/{self.supplier.id}/",
            {"name": "Surat Textiles Pvt Ltd", "contact_info": "new"},
            format="json",
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, {"code": 200, "message": "supplier updated"})

        self.supplier.refresh_from_db()
        self.assertEqual(self.supplier.name, "Surat Textiles Pvt Ltd")
        self.assertEqual(self.supplier.contact_info, "new")

    def test_update_soft_deleted_is_404(self):
        self.supplier.soft_delete()
        response = self.client.put(
            f"/api/suppliers/{self.supplier.id}/",
            {"name": "Back again"},
            format="json",
        )
        self.assertEqual(response.status_code, 404)

    def test_delete_is_soft_and_once(self):
        response = self.client.delete(f"/api/suppliers/{self.supplier.id}/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["message"], "supplier deleted")

        self.supplier.refresh_from_db()
        self.assertIsNotNone(self.supplier.deleted_at)

        again = self.client.delete(f"/api/suppliers/{self.supplier.id}/")
        self.assertEqual(again.status_code, 404)

    def test_cashier_cannot_delete(self):
        self.client.force_authenticate(user=self.cashier)
        response = self.client.delete(f"/api/suppliers/{self.supplier.id}/")
        self.assertEqual(response.status_code, 403)

        self.supplier.refresh_from_db()
        self.assertIsNone(self.supplier.deleted_at)
