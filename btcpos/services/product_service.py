from btcpos.models.product import Product
from btcpos.extensions import db
from btcpos.exceptions import ConflictError, ForbiddenError, NotFoundError
from decimal import Decimal


class ProductService:
    """Product service handling vendor catalogue operations"""

    @staticmethod
    def create_product(vendor_id: str, name: str, price_btc: Decimal, **kwargs) -> Product:
        product = Product(
            vendor_id=vendor_id,
            name=name,
            price_btc=price_btc,
            description=kwargs.get("description") or None,
            image_url=kwargs.get("image_url") or None,
        )

        db.session.add(product)
        db.session.commit()

        return product

    @staticmethod
    def get_owned_product(product_id: str, vendor_id: str) -> Product:
        """Fetch a product, refusing access to other vendors' products"""
        product = db.session.get(Product, product_id)
        if not product:
            raise NotFoundError("Product not found")
        if product.vendor_id != vendor_id:
            raise ForbiddenError("Not authorized")
        return product

    @staticmethod
    def update_product(product_id: str, vendor_id: str, **kwargs) -> Product:
        product = ProductService.get_owned_product(product_id, vendor_id)

        # Empty strings clear optional text fields
        for field in ("description", "image_url"):
            if field in kwargs:
                kwargs[field] = kwargs[field] or None

        product.update(**kwargs)
        return product

    @staticmethod
    def delete_product(product_id: str, vendor_id: str):
        product = ProductService.get_owned_product(product_id, vendor_id)
        if product.order_items:
            raise ConflictError("Product is part of existing orders and cannot be deleted")
        product.delete()

    @staticmethod
    def get_vendor_products(vendor_id: str):
        return (
            Product.query.filter_by(vendor_id=vendor_id)
            .order_by(Product.created_at.desc())
            .all()
        )

    @staticmethod
    def get_vendor_products_by_ids(vendor_id: str, product_ids) -> dict:
        products = Product.query.filter(
            Product.id.in_(product_ids), Product.vendor_id == vendor_id
        ).all()
        return {p.id: p for p in products}

    @staticmethod
    def count_vendor_products(vendor_id: str) -> int:
        return Product.query.filter_by(vendor_id=vendor_id).count()
