"""
Catalog models: categories, products and their variations.
"""
from restaurant_api.api.catalog.models.model_category import CategoryModel
from restaurant_api.api.catalog.models.model_product import ProductModel
from restaurant_api.api.catalog.models.model_variation import VariationModel

__all__ = ["CategoryModel", "ProductModel", "VariationModel"]
