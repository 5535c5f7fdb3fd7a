# products/urls.py

"""
PRODUCTS URLS

Purpose:
- Register product domain routes under /api/
    /api/category/, /api/category/<id>/
    /api/product/,  /api/product/<id>/
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from products.views import CategoryViewSet, ProductViewSet

router = SimpleRouter()

router.register(r"category", CategoryViewSet, basename="category")
router.register(r"product", ProductViewSet, basename="product")

urlpatterns = [
    path("", include(router.urls)),
]
