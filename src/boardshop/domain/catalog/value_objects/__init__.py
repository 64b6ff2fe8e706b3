from boardshop.domain.catalog.value_objects.product_filter import ProductFilter

__all__ = ["ProductFilter"]
