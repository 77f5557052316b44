import json
from btcpos.extensions import db
from btcpos.enums import OrderStatus
from btcpos.models.order import Order


class TestCreateQROrder:
    """Test QR order creation"""

    def test_create_qr_order(self, client, vendor_headers, vendor_user, cart):
        response = client.post(
            "/api/vendor/create-qr-order",
            headers=vendor_headers,
            json={"cartItems": cart},
        )

        assert response.status_code == 200
        qr_data = response.json["qrData"]
        assert qr_data["vendorId"] == vendor_user.id
        assert qr_data["totalBTC"] == 0.00028
        assert qr_data["totalSbtc"] == 2800.0
        assert len(qr_data["cartItems"]) == 2
        assert qr_data["cartItems"][0]["priceSbtc"] == 800.0
        assert json.loads(response.json["qrCodeData"]) == qr_data

        order = db.session.get(Order, qr_data["orderId"])
        assert order.status == OrderStatus.PENDING
        assert order.customer_id is None
        assert order.qr_code_data
        assert len(order.items) == 2

        assert response.json["order"]["id"] == order.id
        assert response.json["order"]["items"][0]["product"]["name"] in ("Coffee", "Sandwich")

    def test_create_qr_order_foreign_product(self, client, other_vendor_headers, cart):
        response = client.post(
            "/api/vendor/create-qr-order",
            headers=other_vendor_headers,
            json={"cartItems": cart},
        )

        assert response.status_code == 400
        assert response.json["error"] == "Some products not found or not owned by vendor"
        assert Order.query.count() == 0

    def test_create_qr_order_empty_cart(self, client, vendor_headers):
        response = client.post(
            "/api/vendor/create-qr-order",
            headers=vendor_headers,
            json={"cartItems": []},
        )

        assert response.status_code == 400

    def test_create_qr_order_bad_quantity(self, client, vendor_headers, cart):
        cart[0]["quantity"] = 0
        response = client.post(
            "/api/vendor/create-qr-order",
            headers=vendor_headers,
            json={"cartItems": cart},
        )

        assert response.status_code == 400


class TestVendorOrders:
    def test_list_orders_with_status_filter(self, client, vendor_headers, customer_headers, cart):
        qr = client.post(
            "/api/vendor/create-qr-order", headers=vendor_headers, json={"cartItems": cart}
        ).json["qrData"]
        client.post(
            "/api/vendor/create-qr-order", headers=vendor_headers, json={"cartItems": cart}
        )
        client.post("/api/customer/pay", headers=customer_headers, json=qr)

        response = client.get("/api/vendor/orders", headers=vendor_headers)
        assert response.status_code == 200
        assert response.json["total"] == 2

        response = client.get(
            "/api/vendor/orders?status=completed", headers=vendor_headers
        )
        assert response.json["total"] == 1
        assert response.json["orders"][0]["id"] == qr["orderId"]

    def test_list_orders_invalid_status(self, client, vendor_headers):
        response = client.get("/api/vendor/orders?status=shipped", headers=vendor_headers)

        assert response.status_code == 400
