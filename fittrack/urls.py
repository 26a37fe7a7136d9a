"""
URL configuration for fittrack project.

All endpoints live under /api/ and speak JSON.
"""

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/", include("accounts.urls")),
    path("api/calories/", include("calories.urls")),
    path("api/weights/", include("weight.urls")),
    path("api/workouts/", include("workouts.urls")),
    path("api/", include("analytics.urls")),
]
