# accounts/urls.py
"""
URL configuration for the accounts application.

Authentication endpoints live under ``auth/``; user management
for administrators under ``admin/users``.
"""

from django.urls import path

from . import views, views_admin

app_name = "accounts"

#: URL patterns for the accounts application
urlpatterns = [
    # Session handling
    path("auth/csrf", views.CsrfView.as_view(), name="csrf"),
    path("auth/login", views.LoginView.as_view(), name="login"),
    path("auth/logout", views.LogoutView.as_view(), name="logout"),
    path("auth/me", views.MeView.as_view(), name="me"),

    # User management (administrators only)
    path("admin/users", views_admin.UserCollectionView.as_view(), name="users"),
    path("admin/users/<int:pk>", views_admin.UserDetailView.as_view(), name="user_detail"),
]
