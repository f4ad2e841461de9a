import unittest
from datetime import datetime, timezone

from sqlalchemy import inspect

from api_case import ApiTestCase
from inventario.core.dates import current_timestamp, normalize_timestamp
from inventario.database import create_db_engine, init_schema


class HealthApiTest(ApiTestCase):
    def test_health(self):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["store"], "ok")
        self.assertIn("app", body)


class TimestampTest(unittest.TestCase):
    def test_current_timestamp_uses_sqlite_layout(self):
        moment = datetime(2024, 3, 10, 9, 5, 7, tzinfo=timezone.utc)
        self.assertEqual(current_timestamp(moment), "2024-03-10 09:05:07")

    def test_blank_values_default_to_now(self):
        moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        self.assertEqual(normalize_timestamp(None, now=moment), "2024-01-02 03:04:05")
        self.assertEqual(normalize_timestamp("  ", now=moment), "2024-01-02 03:04:05")

    def test_given_values_are_kept(self):
        self.assertEqual(normalize_timestamp("2023-12-31T23:59:00Z"), "2023-12-31T23:59:00Z")


class SchemaBootstrapTest(unittest.TestCase):
    def test_init_schema_creates_the_five_store_tables(self):
        db_engine = create_db_engine("sqlite://")
        try:
            init_schema(db_engine)
            tables = set(inspect(db_engine).get_table_names())
        finally:
            db_engine.dispose()

        self.assertEqual(
            tables,
            {"productos", "ventas", "ventas_detalles", "proveedores", "pedidos"},
        )


if __name__ == "__main__":
    unittest.main()
