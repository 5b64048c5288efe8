"""In-memory repositories for products and customers.

Loaders at the process boundary fill these; the core only reads them.
"""

from typing import Dict, Iterable, List, Optional

from .errors import NotFoundError, ValidationError, errmsg
from .models import Customer, Product


class ProductCatalog:
    """Product lookup by code."""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: Dict[str, Product] = {}
        for product in products or ():
            self.add(product)

    def add(self, product: Product) -> None:
        if product.code in self._products:
            raise ValidationError(f"{errmsg.PRODUCT_EXISTS}: {product.code}")
        self._products[product.code] = product

    def lookup(self, code: str) -> Product:
        product = self._products.get(code)
        if product is None:
            raise NotFoundError(errmsg.PRODUCT_NOT_FOUND, code)
        return product

    def find(self, code: str) -> Optional[Product]:
        return self._products.get(code)

    def all(self) -> List[Product]:
        return list(self._products.values())

    def __contains__(self, code: str) -> bool:
        return code in self._products

    def __len__(self) -> int:
        return len(self._products)


class CustomerDirectory:
    """Customer lookup by phone number."""

    def __init__(self, customers: Optional[Iterable[Customer]] = None):
        self._customers: Dict[str, Customer] = {}
        for customer in customers or ():
            self.add(customer)

    def add(self, customer: Customer) -> None:
        if customer.phone in self._customers:
            raise ValidationError(f"{errmsg.CUSTOMER_EXISTS}: {customer.phone}")
        self._customers[customer.phone] = customer

    def lookup(self, phone: str) -> Customer:
        customer = self._customers.get(phone.strip() if phone else phone)
        if customer is None:
            raise NotFoundError(errmsg.CUSTOMER_NOT_FOUND, phone)
        return customer

    def find(self, phone: str) -> Optional[Customer]:
        return self._customers.get(phone)

    def all(self) -> List[Customer]:
        return list(self._customers.values())

    def __len__(self) -> int:
        return len(self._customers)
