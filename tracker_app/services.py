# tracker_app/services.py
"""
CRUD services for projects and tasks.

The views hand request data to these services and never touch the ORM
directly. Each service receives the querysets it works against through
its constructor, which keeps it usable against any manager or filtered
queryset (tests pass the default managers).
"""
import logging

from .exceptions import InvalidArgument, InvalidOperation, NullArgument
from .filters import build_project_filter, build_task_filter, project_ordering, task_ordering
from .models import Project, Task
from .serializers import ProjectSerializer, TaskSerializer

logger = logging.getLogger(__name__)


def _require_positive_id(*ids):
    for value in ids:
        if value is None or value <= 0:
            raise InvalidArgument()


def _validated(serializer):
    if not serializer.is_valid():
        raise InvalidArgument('Validation failed.', detail=serializer.errors)
    return serializer


class ProjectService:
    """Used for CRUD operations over the Project entity."""

    def __init__(self, projects=None):
        self.projects = projects if projects is not None else Project.objects.all()

    def list_projects(self, name=None, priority=None, status=None,
                      start_date=None, complete_date=None, sort_by=None):
        """
        Get the projects matching the filter parameters.

        Args:
            name (str): Substring of the project name.
            priority (int): Exact priority; ignored unless greater than 0.
            status (int): ProjectStatus value.
            start_date (date): Exact start date.
            complete_date (date): Exact completion date.
            sort_by (ProjectSortingOrder): Ordering; id ascending when omitted.

        Returns:
            list: Matching Project instances, empty when nothing matches.
        """
        query = build_project_filter(name, priority, status, start_date, complete_date)
        return list(
            self.projects.filter(query)
            .order_by(*project_ordering(sort_by))
            .prefetch_related('tasks')
        )

    def get_project(self, project_id):
        """Return the project with the given id, or None if there is none."""
        _require_positive_id(project_id)
        return self.projects.filter(pk=project_id).prefetch_related('tasks').first()

    def add_project(self, data):
        """
        Create a project, along with any tasks listed under ``tasks``.

        Raises:
            NullArgument: ``data`` is None.
            InvalidArgument: ``data`` failed validation.
        """
        if data is None:
            raise NullArgument('project')

        project = _validated(ProjectSerializer(data=data)).save()
        logger.info("Created project %s", project.pk)
        return project

    def update_project(self, project_id, data):
        """
        Overwrite the mutable fields of an existing project.

        Raises:
            InvalidArgument: ``project_id`` is not positive, or ``data`` failed validation.
            NullArgument: ``data`` is None.
            Project.DoesNotExist: There is no project with ``project_id``.
        """
        _require_positive_id(project_id)
        if data is None:
            raise NullArgument('newProject')

        project = self.projects.get(pk=project_id)
        project = _validated(ProjectSerializer(project, data=data)).save()
        logger.info("Updated project %s", project.pk)
        return project

    def delete_project(self, project_id):
        """Delete a project and, through the cascade, all of its tasks."""
        _require_positive_id(project_id)

        project = self.projects.get(pk=project_id)
        deleted, _ = project.delete()
        logger.info("Deleted project %s (%d rows)", project_id, deleted)


class TaskService:
    """Used for CRUD operations over the Task entity."""

    def __init__(self, tasks=None, projects=None):
        self.tasks = tasks if tasks is not None else Task.objects.all()
        self.projects = projects if projects is not None else Project.objects.all()

    def list_tasks(self, name=None, priority=None, status=None, sort_by=None):
        """Get the tasks matching the filter parameters, ordered by ``sort_by``."""
        query = build_task_filter(name, priority, status)
        return list(self.tasks.filter(query).order_by(*task_ordering(sort_by)))

    def get_task(self, task_id):
        """Return the task with the given id, or None if there is none."""
        _require_positive_id(task_id)
        return self.tasks.filter(pk=task_id).first()

    def add_task(self, data):
        if data is None:
            raise NullArgument('task')

        task = _validated(TaskSerializer(data=data)).save()
        logger.info("Created task %s in project %s", task.pk, task.project_id)
        return task

    def update_task(self, task_id, data):
        """Overwrite name, description, priority, status and project of a task."""
        _require_positive_id(task_id)
        if data is None:
            raise NullArgument('newTask')

        task = self.tasks.get(pk=task_id)
        task = _validated(TaskSerializer(task, data=data)).save()
        logger.info("Updated task %s", task.pk)
        return task

    def delete_task(self, task_id):
        _require_positive_id(task_id)

        self.tasks.get(pk=task_id).delete()
        logger.info("Deleted task %s", task_id)

    def change_project(self, task_id, project_id):
        """
        Move a task to another project.

        Both ids are checked before the store is queried. The task and the
        target project are then looked up together, and the move is refused
        unless both exist.

        Args:
            task_id (int): Task identifier.
            project_id (int): Identifier of the new owning project.

        Returns:
            Task: The updated task.

        Raises:
            InvalidArgument: Either id is not positive.
            InvalidOperation: The task or the target project does not exist.
        """
        _require_positive_id(task_id, project_id)

        task = self.tasks.filter(pk=task_id).first()
        project_exists = self.projects.filter(pk=project_id).exists()

        if task is None or not project_exists:
            raise InvalidOperation(
                f"Cannot move task {task_id} to project {project_id}: "
                f"{'task' if task is None else 'project'} does not exist."
            )

        task.project_id = project_id
        task.save(update_fields=['project'])
        logger.info("Moved task %s to project %s", task_id, project_id)
        return task
