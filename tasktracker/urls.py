# tasktracker/urls.py
from django.urls import include, path

urlpatterns = [
    path('', include('tracker_app.urls')),
]
