# tracker_app/views.py
import logging

from django.core.exceptions import ObjectDoesNotExist
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import InvalidArgument, InvalidOperation
from .serializers import (
    ChangeProjectQuerySerializer,
    ProjectQuerySerializer,
    ProjectSerializer,
    TaskQuerySerializer,
    TaskSerializer,
)
from .services import ProjectService, TaskService

logger = logging.getLogger(__name__)


class ServiceAPIView(APIView):
    """
    Base view for endpoints that delegate to a service.

    Every handler calls exactly one service operation and converts any
    failure into a JSON error response with a matching status code.
    """
    service_class = None

    def get_service(self):
        return self.service_class()

    def error_response(self, exc, action):
        """
        Log a failed operation and build the response for it.

        Must be called from inside the ``except`` block so the traceback
        is attached to the log record.

        Args:
            exc (Exception): The failure raised by the service.
            action (str): Operation name used in the log message.

        Returns:
            Response: 400 for bad arguments, 404 for missing rows and
            refused cross-entity changes, 500 for everything else.
        """
        logger.exception("%s failed.", action)

        if isinstance(exc, InvalidArgument):
            errors = exc.detail if exc.detail is not None else [str(exc)]
            return Response({'errors': errors}, status=status.HTTP_400_BAD_REQUEST)
        if isinstance(exc, (InvalidOperation, ObjectDoesNotExist)):
            return Response({'errors': [str(exc)]}, status=status.HTTP_404_NOT_FOUND)
        return Response({'errors': ['An unexpected error occurred.']},
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    def invalid_query_response(self, query, action):
        logger.error("%s failed: invalid query parameters %s", action, dict(query.errors))
        return Response({'errors': query.errors}, status=status.HTTP_400_BAD_REQUEST)

    def not_found_response(self, key):
        return Response({'errors': [f"No entity with key {key}."]}, status=status.HTTP_404_NOT_FOUND)


def _payload(request):
    # An empty body is the same as a missing one
    return request.data or None


class ProjectListView(ServiceAPIView):
    """GET /projects lists projects, POST /projects creates one."""
    service_class = ProjectService

    def get(self, request):
        """
        Query Parameters:
            filterName (str): Substring of the project name.
            filterPriority (int): Exact priority.
            filterStatus (str): NotStarted, Active or Completed.
            filterStartDate (date): Exact start date, YYYY-MM-DD.
            filterEndDate (date): Exact completion date, YYYY-MM-DD.
            sortBy (str): One of the ProjectSortingOrder values.
        """
        query = ProjectQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return self.invalid_query_response(query, 'QueryProjects')

        # Serializing reads related rows too, so it stays inside the handled block
        try:
            projects = self.get_service().list_projects(**query.validated_data)
            data = ProjectSerializer(projects, many=True).data
        except Exception as e:
            return self.error_response(e, 'QueryProjects')
        return Response(data)

    def post(self, request):
        payload = _payload(request)
        try:
            project = self.get_service().add_project(payload)
            data = ProjectSerializer(project).data
        except Exception as e:
            return self.error_response(e, 'CreateProject')
        return Response(data, status=status.HTTP_200_OK)


class ProjectDetailView(ServiceAPIView):
    """GET, PUT and DELETE on /projects/{key}."""
    service_class = ProjectService

    def get(self, request, key):
        try:
            project = self.get_service().get_project(key)
            if project is None:
                return self.not_found_response(key)
            data = ProjectSerializer(project).data
        except Exception as e:
            return self.error_response(e, 'GetProjectByKey')
        return Response(data)

    def put(self, request, key):
        payload = _payload(request)
        try:
            project = self.get_service().update_project(key, payload)
            data = ProjectSerializer(project).data
        except Exception as e:
            return self.error_response(e, 'UpdateProject')
        return Response(data)

    def delete(self, request, key):
        try:
            self.get_service().delete_project(key)
        except Exception as e:
            return self.error_response(e, 'DeleteProject')
        return Response({'status': 'success'}, status=status.HTTP_200_OK)


class TaskListView(ServiceAPIView):
    """GET /tasks lists tasks, POST /tasks creates one."""
    service_class = TaskService

    def get(self, request):
        query = TaskQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return self.invalid_query_response(query, 'QueryTasks')

        try:
            tasks = self.get_service().list_tasks(**query.validated_data)
            data = TaskSerializer(tasks, many=True).data
        except Exception as e:
            return self.error_response(e, 'QueryTasks')
        return Response(data)

    def post(self, request):
        payload = _payload(request)
        try:
            task = self.get_service().add_task(payload)
            data = TaskSerializer(task).data
        except Exception as e:
            return self.error_response(e, 'CreateTask')
        return Response(data, status=status.HTTP_200_OK)


class TaskDetailView(ServiceAPIView):
    """GET, PUT, DELETE on /tasks/{key}, and PATCH /tasks/{key}?projectKey= to move a task."""
    service_class = TaskService

    def get(self, request, key):
        try:
            task = self.get_service().get_task(key)
            if task is None:
                return self.not_found_response(key)
            data = TaskSerializer(task).data
        except Exception as e:
            return self.error_response(e, 'GetTaskByKey')
        return Response(data)

    def put(self, request, key):
        payload = _payload(request)
        try:
            task = self.get_service().update_task(key, payload)
            data = TaskSerializer(task).data
        except Exception as e:
            return self.error_response(e, 'UpdateTask')
        return Response(data)

    def delete(self, request, key):
        try:
            self.get_service().delete_task(key)
        except Exception as e:
            return self.error_response(e, 'DeleteTask')
        return Response({'status': 'success'}, status=status.HTTP_200_OK)

    def patch(self, request, key):
        query = ChangeProjectQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return self.invalid_query_response(query, 'ChangeProject')

        try:
            task = self.get_service().change_project(key, query.validated_data['project_id'])
            data = TaskSerializer(task).data
        except Exception as e:
            return self.error_response(e, 'ChangeProject')
        return Response(data)
