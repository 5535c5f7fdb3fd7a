# incoming/urls.py
"""
INCOMING WEBHOOK URLS

Base path (mounted in backend/urls.py):
    /incoming/

- POST /incoming/deposit_callback   (trailing slash optional)
"""

from django.urls import re_path

from incoming.views import DepositCallbackView

app_name = "incoming"

urlpatterns = [
    re_path(r"^deposit_callback/?$", DepositCallbackView.as_view(), name="deposit-callback"),
]
