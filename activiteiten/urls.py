# activiteiten/urls.py
"""
URL configuration for the activiteiten application.

Routes are grouped by the role they serve: ``admin/`` for
administrators, ``docent/`` for docenten (and administrators) and
``student/`` for students.
"""

from django.urls import path

from . import views_admin, views_docent, views_student

# Application namespace used for reverse lookups
app_name = "activiteiten"

#: URL patterns for the activiteiten application
urlpatterns = [
    # Administrators: activity lifecycle
    path("admin/activiteiten", views_admin.AdminActiviteitCollectionView.as_view(), name="admin_list"),
    path("admin/activiteiten/<int:pk>", views_admin.AdminActiviteitDetailView.as_view(), name="admin_detail"),
    path("admin/activiteiten/<int:pk>/status", views_admin.ActiviteitStatusView.as_view(), name="admin_status"),

    # Docenten: own activities, participation, student requests
    path("docent/counts", views_docent.DocentCountsView.as_view(), name="docent_counts"),
    path("docent/activiteiten", views_docent.DocentActiviteitCollectionView.as_view(), name="docent_list"),
    path("docent/activiteiten/<int:pk>", views_docent.DocentActiviteitDetailView.as_view(), name="docent_detail"),
    path("docent/inschrijvingen/<int:pk>", views_docent.DocentInschrijvingView.as_view(), name="docent_inschrijving"),
    path("docent/aanvragen", views_docent.DocentAanvraagCollectionView.as_view(), name="docent_aanvragen"),
    path("docent/aanvragen/<int:pk>", views_docent.DocentAanvraagDetailView.as_view(), name="docent_aanvraag"),
    path("docent/studenten", views_docent.DocentStudentenView.as_view(), name="docent_studenten"),
    path(
        "docent/studenten/<int:pk>/scorekaart",
        views_docent.DocentStudentScorekaartView.as_view(),
        name="docent_scorekaart",
    ),

    # Students: requests, enrollments, scorekaart
    path("student/counts", views_student.StudentCountsView.as_view(), name="student_counts"),
    path("student/aanvragen", views_student.StudentAanvraagView.as_view(), name="student_aanvragen"),
    path("student/activiteiten", views_student.StudentActiviteitenView.as_view(), name="student_activiteiten"),
    path(
        "student/inschrijvingen",
        views_student.StudentInschrijvingCollectionView.as_view(),
        name="student_inschrijvingen",
    ),
    path(
        "student/inschrijvingen/<int:pk>",
        views_student.StudentInschrijvingDetailView.as_view(),
        name="student_inschrijving",
    ),
    path("student/scorekaart", views_student.StudentScorekaartView.as_view(), name="student_scorekaart"),
    path("student/scorekaart/pdf", views_student.StudentScorekaartPdfView.as_view(), name="student_scorekaart_pdf"),
]
