import unittest

from api_case import ApiTestCase
from inventario.services.dashboard_service import build_report_row, month_label, round_money


class DashboardApiTest(ApiTestCase):
    def _sell(self, product_id, price, quantity=1, fecha="2024-03-10 10:00:00"):
        response = self.register_sale(
            [
                {
                    "productoId": product_id,
                    "cantidad": quantity,
                    "precio": price,
                    "subtotal": price * quantity,
                }
            ],
            fecha=fecha,
        )
        self.assertEqual(response.status_code, 200, response.text)

    def test_two_lines_same_month_are_aggregated(self):
        product_id = self.create_product(subcategoria="Camisas", precioCompra=5, cantidad=10)
        self._sell(product_id, 10)
        self._sell(product_id, 20)

        rows = self.client.get("/api/dashboard-subcategorias").json()

        self.assertEqual(
            rows,
            [
                {
                    "producto": "Camisas",
                    "mes": "Marzo",
                    "anio": "2024",
                    "ventas": 2,
                    "precio": 15.0,
                    "ingresos": 20.0,
                }
            ],
        )

    def test_groups_by_subcategory_and_month_in_calendar_order(self):
        shirt = self.create_product(sku="A", subcategoria="Camisas", precioCompra=5, cantidad=50)
        pants = self.create_product(sku="B", subcategoria="Pantalones", precioCompra=10, cantidad=50)
        self._sell(shirt, 10, fecha="2025-01-05 12:00:00")
        self._sell(pants, 30, quantity=2, fecha="2024-11-20 12:00:00")
        self._sell(shirt, 12, fecha="2024-02-01 08:00:00")

        rows = self.client.get("/api/dashboard-subcategorias").json()

        self.assertEqual(
            [(row["anio"], row["mes"], row["producto"]) for row in rows],
            [
                ("2024", "Febrero", "Camisas"),
                ("2024", "Noviembre", "Pantalones"),
                ("2025", "Enero", "Camisas"),
            ],
        )
        self.assertEqual(rows[1]["ventas"], 2)
        self.assertEqual(rows[1]["ingresos"], 40.0)

    def test_empty_store_yields_empty_report(self):
        response = self.client.get("/api/dashboard-subcategorias")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])

    def test_unparseable_sale_date_leaves_out_month_label(self):
        product_id = self.create_product(subcategoria="Camisas", precioCompra=5, cantidad=10)
        self._sell(product_id, 10, fecha="garbage")

        rows = self.client.get("/api/dashboard-subcategorias").json()

        self.assertEqual(len(rows), 1)
        self.assertNotIn("mes", rows[0])
        self.assertIsNone(rows[0]["anio"])
        self.assertEqual(rows[0]["producto"], "Camisas")
        self.assertEqual(rows[0]["ventas"], 1)


class DashboardHelpersTest(unittest.TestCase):
    def test_month_labels(self):
        self.assertEqual(month_label("01"), "Enero")
        self.assertEqual(month_label("12"), "Diciembre")
        self.assertIsNone(month_label("13"))
        self.assertIsNone(month_label(None))

    def test_round_money_rounds_half_up(self):
        self.assertEqual(round_money(2.675), 2.68)
        self.assertEqual(round_money(0.125), 0.13)
        self.assertEqual(round_money(15), 15.0)
        self.assertIsNone(round_money(None))

    def test_report_row_without_prices_has_no_money_values(self):
        row = build_report_row(
            {
                "producto": "Gorras",
                "mes_num": "07",
                "anio": "2024",
                "ventas_totales": 3,
                "precio_promedio_venta": None,
                "precio_promedio_compra": 4.0,
            }
        )

        self.assertEqual(row.month, "Julio")
        self.assertEqual(row.units_sold, 3)
        self.assertIsNone(row.avg_sale_price)
        self.assertIsNone(row.profit)

    def test_report_row_profit_uses_average_prices(self):
        row = build_report_row(
            {
                "producto": "Camisas",
                "mes_num": "03",
                "anio": "2024",
                "ventas_totales": 4,
                "precio_promedio_venta": 12.333333,
                "precio_promedio_compra": 5.0,
            }
        )

        self.assertEqual(row.avg_sale_price, 12.33)
        self.assertEqual(row.profit, 29.33)

    def test_report_row_outside_month_table_drops_month_key(self):
        row = build_report_row(
            {
                "producto": "Camisas",
                "mes_num": "13",
                "anio": "2024",
                "ventas_totales": 1,
                "precio_promedio_venta": 10.0,
                "precio_promedio_compra": 5.0,
            }
        )

        self.assertIsNone(row.month)
        self.assertNotIn("mes", row.model_dump(by_alias=True))
        self.assertEqual(row.model_dump(by_alias=True)["ingresos"], 5.0)
        self.assertIn("mes", build_report_row({"mes_num": "05"}).model_dump(by_alias=True))


if __name__ == "__main__":
    unittest.main()
