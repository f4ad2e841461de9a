import argparse
import logging

from sqlalchemy import delete, select

from inventario.core.logging import setup_logging
from inventario.database import SessionLocal, engine, ensure_database_dir, init_schema
from inventario.models import Product, PurchaseOrder, Sale, SaleLineItem, Supplier
from inventario.schemas.sales import SaleCreate
from inventario.services.sale_service import register_sale

logger = logging.getLogger(__name__)


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample catalog and sales data.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    ensure_database_dir(engine.url)
    init_schema(engine)

    db = SessionLocal()
    try:
        if args.reset:
            db.execute(delete(SaleLineItem))
            db.execute(delete(Sale))
            db.execute(delete(PurchaseOrder))
            db.execute(delete(Supplier))
            db.execute(delete(Product))
            db.commit()

        has_product = db.execute(select(Product.id).limit(1)).first()
        if has_product:
            logger.info("Seed skipped: products already exist.")
            return

        products = [
            Product(
                sku="CAM-001",
                name="Camisa lino",
                category="Ropa",
                subcategory="Camisas",
                purchase_price=12.5,
                sale_price=25.0,
                quantity=40,
                color="Blanco",
                brand="Andina",
                description="Camisa manga larga",
            ),
            Product(
                sku="PAN-002",
                name="Pantalon denim",
                category="Ropa",
                subcategory="Pantalones",
                purchase_price=18.0,
                sale_price=39.9,
                quantity=25,
                color="Azul",
                brand="Andina",
                description="Corte recto",
            ),
        ]
        db.add_all(products)
        supplier = Supplier(name="Textiles del Norte", phone="555-0101", email="ventas@textiles.example")
        db.add(supplier)
        db.flush()

        db.add(
            PurchaseOrder(
                purchase_price=12.5,
                sale_price=25.0,
                product_id=products[0].id,
                supplier_id=supplier.id,
                quantity=20,
            )
        )
        db.commit()

        sale_id = register_sale(
            db,
            SaleCreate.model_validate(
                {
                    "cliente": {
                        "nombre": "Ana",
                        "apellidos": "Rojas",
                        "cedula": "1712345678",
                        "direccion": "Av. Central 12",
                    },
                    "detalles": [
                        {"productoId": products[0].id, "cantidad": 2, "precio": 25.0, "subtotal": 50.0},
                        {"productoId": products[1].id, "cantidad": 1, "precio": 39.9, "subtotal": 39.9},
                    ],
                    "total": 89.9,
                }
            ),
        )
        logger.info("Seed complete: %d products, 1 supplier, sale %s.", len(products), sale_id)
    finally:
        db.close()


if __name__ == "__main__":
    main()
