# shopcart/services/product_client.py
from decimal import Decimal
from typing import List

import requests

from shopcart.domain.cart import Product
from shopcart.utils.retry import http_retry
from shopcart.utils.settings import PRODUCT_SERVICE_URL, PRODUCT_CLIENT_TIMEOUT
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


def _to_product(data: dict) -> Product:
    return Product(
        id=str(data["id"]),
        name=data["name"],
        price=Decimal(str(data["price"])),
    )


class ProductClient:
    """Read-only catalog gateway over the product service HTTP API."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else PRODUCT_CLIENT_TIMEOUT

    @http_retry()
    def find_by_id(self, product_id: str) -> Product | None:
        url = f"{self.base_url}/products/{product_id}"
        logger.info("ProductClient GET", url=url)

        resp = requests.get(url, timeout=self.timeout)
        # 404 is an answer, not a failure, so it must not reach the retry
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return _to_product(resp.json())

    @http_retry()
    def list_products(self) -> List[Product]:
        url = f"{self.base_url}/products"
        logger.info("ProductClient GET", url=url)

        resp = requests.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return [_to_product(p) for p in resp.json()]
