"""
Core app URL configuration.
"""

from django.urls import path

from apps.core.views import (
    EMICalculatorView,
    FormatPriceView,
    ParsePriceView,
    TriggerIngestionView,
)

urlpatterns = [
    path('emi-calculator', EMICalculatorView.as_view(), name='emi-calculator'),
    path('format-price', FormatPriceView.as_view(), name='format-price'),
    path('parse-price', ParsePriceView.as_view(), name='parse-price'),
    path(
        'admin/ingest-properties',
        TriggerIngestionView.as_view(),
        name='ingest-properties',
    ),
]
