from django.urls import path

from . import views

app_name = "analytics"

urlpatterns = [
    path("dashboard/", views.dashboard, name="dashboard"),
    path("statistics/", views.statistics, name="statistics"),
    path("activity/recent/", views.recent_activity, name="recent_activity"),
    path("export/", views.export_data, name="export"),
]
