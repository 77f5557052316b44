import json
import logging

from btcpos.models.order import Order, OrderItem
from btcpos.extensions import db
from btcpos.enums import OrderStatus
from btcpos.exceptions import ServiceError
from btcpos.services.product_service import ProductService
from btcpos.utils.currency import btc_to_sbtc, format_btc, format_sbtc
from btcpos.utils.helpers import generate_qr_code_data
from decimal import Decimal

logger = logging.getLogger(__name__)


def _validate_cart(vendor_id, cart_items):
    """Every cart line must reference a product the vendor owns"""
    if not cart_items:
        raise ServiceError("Cart is empty")

    product_ids = {str(item["product_id"]) for item in cart_items}
    products_map = ProductService.get_vendor_products_by_ids(vendor_id, product_ids)

    if len(products_map) != len(product_ids):
        raise ServiceError("Some products not found or not owned by vendor")

    return products_map


def _build_order_items(order, cart_items):
    for item in cart_items:
        order.items.append(
            OrderItem(
                product_id=str(item["product_id"]),
                quantity=item["quantity"],
                price_btc=item["price_btc"],
            )
        )


class OrderService:
    @staticmethod
    def create_qr_order(vendor_id: str, cart_items) -> dict:
        """Snapshot a vendor cart as a pending order and build its QR payload"""
        _validate_cart(vendor_id, cart_items)

        try:
            order = Order(
                vendor_id=vendor_id,
                status=OrderStatus.PENDING,
                qr_code_data=generate_qr_code_data(),
            )
            _build_order_items(order, cart_items)
            total_btc = order.calculate_total()
            db.session.add(order)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        qr_data = {
            "vendorId": vendor_id,
            "orderId": order.id,
            "cartItems": [
                {
                    "productId": str(item["product_id"]),
                    "quantity": item["quantity"],
                    "priceBtc": float(item["price_btc"]),
                    "priceSbtc": float(btc_to_sbtc(item["price_btc"])),
                }
                for item in cart_items
            ],
            "totalBTC": float(format_btc(total_btc)),
            "totalSbtc": float(format_sbtc(btc_to_sbtc(total_btc))),
        }

        logger.info(f"Created QR order {order.id} for vendor {vendor_id}")
        return {
            "order": order.to_dict(include_items=True, include_products=True),
            "qrData": qr_data,
            "qrCodeData": json.dumps(qr_data),
        }

    @staticmethod
    def create_completed_order(vendor_id: str, customer_id: str, total_btc: Decimal, cart_items) -> Order:
        """Add a paid order to the session without committing"""
        order = Order(
            vendor_id=vendor_id,
            customer_id=customer_id,
            total_btc=total_btc,
            status=OrderStatus.COMPLETED,
        )
        _build_order_items(order, cart_items)
        db.session.add(order)
        db.session.flush()
        return order

    @staticmethod
    def validate_cart(vendor_id: str, cart_items):
        return _validate_cart(vendor_id, cart_items)

    @staticmethod
    def get_vendor_orders(vendor_id: str, status: str = None, page: int = 1, per_page: int = 20):
        query = Order.query.filter_by(vendor_id=vendor_id)

        if status:
            query = query.filter_by(status=OrderStatus(status))

        return query.order_by(Order.created_at.desc()).paginate(
            page=page, per_page=per_page, error_out=False
        )
