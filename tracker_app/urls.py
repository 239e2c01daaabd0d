# tracker_app/urls.py
from django.urls import path, register_converter

from .views import ProjectDetailView, ProjectListView, TaskDetailView, TaskListView


class SignedIntConverter:
    """Like the built-in ``int`` converter, but also matches zero and negative keys."""
    regex = '-?[0-9]+'

    def to_python(self, value):
        return int(value)

    def to_url(self, value):
        return str(value)


register_converter(SignedIntConverter, 'signed_int')

urlpatterns = [
    path('projects', ProjectListView.as_view(), name='projects'),
    path('projects/<signed_int:key>', ProjectDetailView.as_view(), name='project-detail'),
    path('tasks', TaskListView.as_view(), name='tasks'),
    path('tasks/<signed_int:key>', TaskDetailView.as_view(), name='task-detail'),
]
