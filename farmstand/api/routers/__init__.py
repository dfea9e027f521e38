from . import dog, healthz, products, readyz

__all__ = ["dog", "healthz", "products", "readyz"]
