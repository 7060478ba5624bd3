# backend/tests/test_service_root.py

from django.test import TestCase
from rest_framework.test import APIClient


class ServiceRootTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_banner(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, {"message": "Tulsi POS Backend Running Successfully"})

    def test_health(self):
        response = self.client.get("/api/health/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, {"status": "ok", "db": "ok"})

    def test_schema_is_public(self):
        response = self.client.get("/api/schema/")
        self.assertEqual(response.status_code, 200)
