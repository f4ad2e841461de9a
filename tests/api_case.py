import unittest

from fastapi.testclient import TestClient

from inventario.config import Settings
from inventario.database import create_db_engine
from inventario.main import create_app


class ApiTestCase(unittest.TestCase):
    """Runs the API against a private in-memory SQLite store."""

    def setUp(self):
        self.engine = create_db_engine("sqlite://")
        self.app = create_app(settings=Settings(), db_engine=self.engine)
        self.client = TestClient(self.app)
        self.client.__enter__()
        self.Session = self.app.state.session_factory

    def tearDown(self):
        self.client.__exit__(None, None, None)

    def create_product(self, **overrides):
        body = {
            "sku": "SKU-1",
            "nombre": "Camisa",
            "categoria": "Ropa",
            "subcategoria": "Camisas",
            "precioCompra": 5.0,
            "precioVenta": 12.0,
            "cantidad": 10,
            "color": "Azul",
            "marca": "Andina",
            "descripcion": "Manga corta",
        }
        body.update(overrides)
        response = self.client.post("/api/productos", json=body)
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()["id"]

    def register_sale(self, details, customer=None, **extra):
        body = {
            "cliente": customer
            or {
                "nombre": "Ana",
                "apellidos": "Rojas",
                "cedula": "1712345678",
                "direccion": "Av. Central 12",
            },
            "detalles": details,
            "total": sum(item.get("subtotal") or 0 for item in details),
        }
        body.update(extra)
        return self.client.post("/api/ventas", json=body)
