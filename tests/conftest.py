# tests/conftest.py
import datetime
import logging

import pytest
from rest_framework.test import APIClient

from tracker_app.models import Project, ProjectStatus, Task, TaskStatus
from tracker_app.services import ProjectService, TaskService


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def project_service():
    return ProjectService()


@pytest.fixture
def task_service():
    return TaskService()


@pytest.fixture
def make_project(db):
    """Create and return a Project; keyword arguments override the defaults."""
    def factory(**overrides):
        fields = {
            'name': 'Project',
            'start_date': datetime.date(2021, 7, 1),
            'complete_date': datetime.date(2021, 8, 1),
            'priority': 1,
            'status': ProjectStatus.ACTIVE,
        }
        fields.update(overrides)
        return Project.objects.create(**fields)
    return factory


@pytest.fixture
def make_task(db, make_project):
    """Create and return a Task, creating an owning project if none is given."""
    def factory(**overrides):
        fields = {
            'name': 'Task',
            'description': '',
            'priority': 1,
            'status': TaskStatus.TO_DO,
        }
        fields.update(overrides)
        if 'project' not in fields:
            fields['project'] = make_project()
        return Task.objects.create(**fields)
    return factory


@pytest.fixture
def sample_projects(make_project):
    """Three projects with distinct names, dates, priorities and statuses."""
    return [
        make_project(name='Lorem magna', start_date=datetime.date(2021, 1, 10),
                     complete_date=datetime.date(2021, 3, 1), priority=3,
                     status=ProjectStatus.ACTIVE),
        make_project(name='Alpha eu', start_date=datetime.date(2021, 2, 10),
                     complete_date=datetime.date(2021, 2, 20), priority=1,
                     status=ProjectStatus.COMPLETED),
        make_project(name='Zeta magna', start_date=datetime.date(2020, 12, 1),
                     complete_date=datetime.date(2021, 6, 1), priority=5,
                     status=ProjectStatus.NOT_STARTED),
    ]


@pytest.fixture
def tracker_logs(caplog):
    """Capture records from the ``tracker_app`` loggers, which do not propagate to the root logger."""
    logger = logging.getLogger('tracker_app')
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.INFO, logger='tracker_app')
    yield caplog
    logger.removeHandler(caplog.handler)
