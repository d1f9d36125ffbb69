"""
Seed script to generate synthetic EDI 850 purchase orders for demo purposes
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from decimal import Decimal
from faker import Faker
from erp_bridge.database import SessionLocal, engine, Base
from erp_bridge.schemas.edi import Inbound850Document, Inbound850Item
from erp_bridge.services.order_service import ingest_purchase_order
from erp_bridge.services.order_store import OrderStore
import erp_bridge.models  # noqa: F401

fake = Faker()


def build_inbound_850(index: int, partners: list[str]) -> Inbound850Document:
    """Build one synthetic EDI 850 document"""
    num_items = fake.random_int(min=1, max=5)
    items = [
        Inbound850Item(
            product_code=f"SKU-{fake.random_int(min=1000, max=9999)}",
            qty=fake.random_int(min=1, max=100),
            price=Decimal(str(round(fake.random.uniform(1.0, 500.0), 2))),
        )
        for _ in range(num_items)
    ]
    return Inbound850Document(
        document_id=fake.uuid4(),
        sender_id=fake.random_element(elements=partners),
        po_number=f"PO-{2026}-{str(index + 1).zfill(4)}",
        date_created=fake.date_time_this_year().isoformat(),
        items=items,
    )


def create_purchase_orders(store: OrderStore, count: int = 12) -> list[int]:
    """Ingest synthetic 850 documents through the normal mapping path"""
    partners = [fake.bothify(text='ZB-????-###').upper() for _ in range(4)]
    return [ingest_purchase_order(build_inbound_850(i, partners), store) for i in range(count)]


def main():
    """Main seeding function"""
    print("Creating database tables...")
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        print("Creating purchase orders...")
        order_ids = create_purchase_orders(OrderStore(db), count=12)
        print(f"Created {len(order_ids)} purchase orders")

        print("\nSeeding complete!")
        print(f"  - Order IDs: {order_ids[0]}..{order_ids[-1]}")

    except Exception as e:
        print(f"Error during seeding: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
