# tracker_app/filters.py
"""
Query composition for the list endpoints.

Filters are built up as a single ``Q`` object so callers can hand them to
any queryset, and sort orders are translated into ``order_by`` arguments.
"""
from django.db import models
from django.db.models import Q


class ProjectSortingOrder(models.TextChoices):
    NAME_ASC = 'NameAsc'
    NAME_DESC = 'NameDesc'
    START_DATE_ASC = 'StartDateAsc'
    START_DATE_DESC = 'StartDateDesc'
    COMPLETE_DATE_ASC = 'CompleteDateAsc'
    COMPLETE_DATE_DESC = 'CompleteDateDesc'
    STATUS_ASC = 'StatusAsc'
    STATUS_DESC = 'StatusDesc'
    PRIORITY_ASC = 'PriorityAsc'
    PRIORITY_DESC = 'PriorityDesc'


class TaskSortingOrder(models.TextChoices):
    NAME_ASC = 'NameAsc'
    NAME_DESC = 'NameDesc'
    PRIORITY_ASC = 'PriorityAsc'
    PRIORITY_DESC = 'PriorityDesc'
    STATUS_ASC = 'StatusAsc'
    STATUS_DESC = 'StatusDesc'


PROJECT_SORT_FIELDS = {
    ProjectSortingOrder.NAME_ASC: 'name',
    ProjectSortingOrder.NAME_DESC: '-name',
    ProjectSortingOrder.START_DATE_ASC: 'start_date',
    ProjectSortingOrder.START_DATE_DESC: '-start_date',
    ProjectSortingOrder.COMPLETE_DATE_ASC: 'complete_date',
    ProjectSortingOrder.COMPLETE_DATE_DESC: '-complete_date',
    ProjectSortingOrder.STATUS_ASC: 'status',
    ProjectSortingOrder.STATUS_DESC: '-status',
    ProjectSortingOrder.PRIORITY_ASC: 'priority',
    ProjectSortingOrder.PRIORITY_DESC: '-priority',
}

TASK_SORT_FIELDS = {
    TaskSortingOrder.NAME_ASC: 'name',
    TaskSortingOrder.NAME_DESC: '-name',
    TaskSortingOrder.PRIORITY_ASC: 'priority',
    TaskSortingOrder.PRIORITY_DESC: '-priority',
    TaskSortingOrder.STATUS_ASC: 'status',
    TaskSortingOrder.STATUS_DESC: '-status',
}


def _common_filter(name, priority, status):
    query = Q()

    # Blank names are treated as "no filter"
    if name and name.strip():
        query &= Q(name__contains=name)

    # Zero and negative priorities are ignored
    if priority is not None and priority > 0:
        query &= Q(priority=priority)

    if status is not None:
        query &= Q(status=status)

    return query


def build_project_filter(name=None, priority=None, status=None, start_date=None, complete_date=None):
    """
    Compose the filter for a project listing.

    Args:
        name (str): Substring the project name must contain.
        priority (int): Exact priority, ignored unless greater than 0.
        status (int): Exact ProjectStatus value.
        start_date (date): Exact start date.
        complete_date (date): Exact completion date.

    Returns:
        Q: Conjunction of every supplied filter; an empty Q when none apply.
    """
    query = _common_filter(name, priority, status)

    if start_date is not None:
        query &= Q(start_date=start_date)

    if complete_date is not None:
        query &= Q(complete_date=complete_date)

    return query


def build_task_filter(name=None, priority=None, status=None):
    """Compose the filter for a task listing. Same rules as for projects."""
    return _common_filter(name, priority, status)


def _ordering(fields, sort_by):
    if sort_by is None:
        return ['id']
    # Fall back to id for anything unknown, and use id to break ties
    return [fields.get(sort_by, 'id'), 'id']


def project_ordering(sort_by=None):
    """Return the ``order_by`` arguments for a ProjectSortingOrder."""
    return _ordering(PROJECT_SORT_FIELDS, sort_by)


def task_ordering(sort_by=None):
    """Return the ``order_by`` arguments for a TaskSortingOrder."""
    return _ordering(TASK_SORT_FIELDS, sort_by)
