from django.urls import path

from compilations.handlers import (
    AdminCompilationDetailView,
    AdminCompilationListView,
    CompilationDetailView,
    CompilationListView,
)

urlpatterns = [
    path(
        "admin/compilations",
        AdminCompilationListView.as_view(),
        name="admin-compilation-list",
    ),
    path(
        "admin/compilations/<str:comp_id>",
        AdminCompilationDetailView.as_view(),
        name="admin-compilation-detail",
    ),
    path("compilations", CompilationListView.as_view(), name="compilation-list"),
    path(
        "compilations/<str:comp_id>",
        CompilationDetailView.as_view(),
        name="compilation-detail",
    ),
]
