# opleidingen/urls.py
"""
URL configuration for the opleidingen application.
"""

from django.urls import path
from . import views

app_name = "opleidingen"

#: URL patterns for the opleidingen application (administrators only)
urlpatterns = [
    path("admin/opleidingen", views.OpleidingCollectionView.as_view(), name="list"),
    path("admin/opleidingen/<int:pk>", views.OpleidingDetailView.as_view(), name="detail"),
    path("admin/opleidingen/<int:pk>/users", views.OpleidingUsersView.as_view(), name="users"),
    path(
        "admin/opleidingen/<int:pk>/docenten",
        views.OpleidingDocentenView.as_view(),
        name="docenten",
    ),
]
