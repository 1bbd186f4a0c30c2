# module photostore.catalog.views

"""Endpoints du catalogue.
- GET /api/products: liste complète des produits.
- GET /api/products/{product_id}: un produit, ou 404 {"error": "Product not found"}.
"""
from typing import List
from fastapi import APIRouter

from photostore.catalog import repository
from photostore.catalog.models import Product

router = APIRouter(prefix="/api/products", tags=["Catalog API"])


@router.get("", response_model=List[Product])
def list_products():
    return repository.list_products()


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: str):
    # NotFoundError est traduite en 404 par les gestionnaires d'exceptions
    return repository.get_product(product_id)
