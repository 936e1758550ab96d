# Services: product API client, models and notifications
from .api import ProductApi
from .models import Product, Stock
from .notifications import ToastNotifier

__all__ = ["ProductApi", "Product", "Stock", "ToastNotifier"]
