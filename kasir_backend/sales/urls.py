# sales/urls.py

from django.urls import path

from sales.views.checkout import CheckoutView
from sales.views.reports import DailySalesReportView, SalesReportView

urlpatterns = [
    path("checkout/", CheckoutView.as_view(), name="checkout"),
    path("report/hari-ini/", DailySalesReportView.as_view(), name="report-daily"),
    path("report/", SalesReportView.as_view(), name="report-range"),
]
