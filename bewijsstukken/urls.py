# bewijsstukken/urls.py
"""
URL configuration for the bewijsstukken application.
"""

from django.urls import path
from . import views

# Application namespace used for reverse lookups
app_name = "bewijsstukken"

#: URL patterns for the bewijsstukken application
urlpatterns = [
    path("bewijsstukken", views.BewijsstukCollectionView.as_view(), name="list"),
    path("bewijsstukken/<int:pk>", views.BewijsstukDetailView.as_view(), name="detail"),
    path("student/bewijsstukken", views.StudentBewijsView.as_view(), name="student_list"),
    path("student/bewijsstukken/indienen", views.StudentIndienenView.as_view(), name="student_indienen"),
    path("docent/bewijsstukken", views.DocentBewijsCollectionView.as_view(), name="docent_list"),
    path("docent/bewijsstukken/<int:pk>", views.DocentBewijsDetailView.as_view(), name="docent_detail"),
]
