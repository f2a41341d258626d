"""
Lead URL configuration.
"""

from django.urls import path

from apps.leads.views import AdminLeadListView, CreateLeadView

urlpatterns = [
    path('leads', CreateLeadView.as_view(), name='create-lead'),
    path('admin/leads', AdminLeadListView.as_view(), name='admin-lead-list'),
]
