"""
Property URL configuration.
"""

from django.urls import path

from apps.properties.views import (
    AdminPropertyDetailView,
    AdminPropertyListView,
    MatchPropertiesView,
    PropertyDetailView,
    PropertyListView,
)

urlpatterns = [
    path('properties', PropertyListView.as_view(), name='property-list'),
    path(
        'properties/<uuid:property_id>',
        PropertyDetailView.as_view(),
        name='property-detail',
    ),
    path(
        'match-properties',
        MatchPropertiesView.as_view(),
        name='match-properties',
    ),
    path(
        'admin/properties',
        AdminPropertyListView.as_view(),
        name='admin-property-list',
    ),
    path(
        'admin/properties/<uuid:property_id>',
        AdminPropertyDetailView.as_view(),
        name='admin-property-detail',
    ),
]
