from .product import ProductDTO, ProductListDTO

__all__ = ["ProductDTO", "ProductListDTO"]
