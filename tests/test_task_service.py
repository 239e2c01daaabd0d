import pytest

from tracker_app.exceptions import InvalidArgument, InvalidOperation, NullArgument
from tracker_app.filters import TaskSortingOrder
from tracker_app.models import Project, Task, TaskStatus

pytestmark = pytest.mark.django_db


@pytest.fixture
def sample_tasks(make_project, make_task):
    project = make_project(name='Owner')
    return [
        make_task(name='Write magna report', priority=2, status=TaskStatus.IN_PROGRESS, project=project),
        make_task(name='Review eu draft', priority=1, status=TaskStatus.DONE, project=project),
        make_task(name='Plan magna sprint', priority=4, status=TaskStatus.TO_DO, project=project),
    ]


class TestListTasks:

    def test_without_filters(self, task_service, sample_tasks):
        assert [t.pk for t in task_service.list_tasks()] == [t.pk for t in sample_tasks]

    def test_name_filter(self, task_service, sample_tasks):
        tasks = task_service.list_tasks(name='magna')

        assert {t.name for t in tasks} == {'Write magna report', 'Plan magna sprint'}

    def test_unmatched_filter_returns_empty_list(self, task_service, sample_tasks):
        assert task_service.list_tasks(name='this doesnt exist') == []
        assert task_service.list_tasks(priority=5) == []

    def test_status_filter(self, task_service, sample_tasks):
        tasks = task_service.list_tasks(status=TaskStatus.TO_DO)

        assert [t.name for t in tasks] == ['Plan magna sprint']

    @pytest.mark.parametrize('sort_by, expected', [
        (TaskSortingOrder.NAME_ASC, ['Plan magna sprint', 'Review eu draft', 'Write magna report']),
        (TaskSortingOrder.NAME_DESC, ['Write magna report', 'Review eu draft', 'Plan magna sprint']),
        (TaskSortingOrder.PRIORITY_ASC, ['Review eu draft', 'Write magna report', 'Plan magna sprint']),
        (TaskSortingOrder.PRIORITY_DESC, ['Plan magna sprint', 'Write magna report', 'Review eu draft']),
        (TaskSortingOrder.STATUS_ASC, ['Plan magna sprint', 'Write magna report', 'Review eu draft']),
        (TaskSortingOrder.STATUS_DESC, ['Review eu draft', 'Write magna report', 'Plan magna sprint']),
    ])
    def test_sorting(self, task_service, sample_tasks, sort_by, expected):
        assert [t.name for t in task_service.list_tasks(sort_by=sort_by)] == expected


class TestGetTask:

    def test_existing_id(self, task_service, make_task):
        task = make_task()

        assert task_service.get_task(task.pk) == task

    def test_unknown_id_returns_none(self, task_service):
        assert task_service.get_task(5454) is None

    @pytest.mark.parametrize('task_id', [0, -3])
    def test_non_positive_id(self, task_service, task_id):
        with pytest.raises(InvalidArgument):
            task_service.get_task(task_id)


class TestAddTask:

    def test_creates_task(self, task_service, make_project):
        project = make_project()

        task = task_service.add_task({
            'name': 'Demo task',
            'description': 'Something to do',
            'priority': 2,
            'status': 'InProgress',
            'project_id': project.pk,
        })

        stored = Task.objects.get(pk=task.pk)
        assert stored.project_id == project.pk
        assert stored.status == TaskStatus.IN_PROGRESS

    def test_null_payload(self, task_service):
        with pytest.raises(NullArgument):
            task_service.add_task(None)

    def test_unknown_project(self, task_service):
        with pytest.raises(InvalidArgument) as excinfo:
            task_service.add_task({'name': 'Orphan', 'priority': 1, 'project_id': 777})

        assert 'project_id' in excinfo.value.detail


class TestUpdateTask:

    def test_overwrites_fields(self, task_service, make_task, make_project):
        task = make_task(name='Old', description='old')
        other = make_project(name='Other')

        task_service.update_task(task.pk, {
            'name': 'New',
            'priority': 3,
            'status': 'Done',
            'project_id': other.pk,
        })

        task.refresh_from_db()
        assert task.name == 'New'
        assert task.description == ''
        assert task.status == TaskStatus.DONE
        assert task.project_id == other.pk

    def test_non_positive_id(self, task_service):
        with pytest.raises(InvalidArgument):
            task_service.update_task(0, {'name': 'x', 'priority': 1, 'project_id': 1})

    def test_null_payload(self, task_service, make_task):
        with pytest.raises(NullArgument):
            task_service.update_task(make_task().pk, None)

    def test_missing_task(self, task_service, make_project):
        project = make_project()

        with pytest.raises(Task.DoesNotExist):
            task_service.update_task(124121, {'name': 'x', 'priority': 1, 'project_id': project.pk})


class TestDeleteTask:

    def test_deletes_only_the_task(self, task_service, make_task):
        task = make_task()

        task_service.delete_task(task.pk)

        assert not Task.objects.filter(pk=task.pk).exists()
        assert Project.objects.filter(pk=task.project_id).exists()

    def test_non_positive_id(self, task_service):
        with pytest.raises(InvalidArgument):
            task_service.delete_task(-1)

    def test_missing_task(self, task_service):
        with pytest.raises(Task.DoesNotExist):
            task_service.delete_task(9342)


class TestChangeProject:

    def test_moves_task(self, task_service, make_task, make_project):
        task = make_task()
        target = make_project(name='Target')

        task_service.change_project(task.pk, target.pk)

        task.refresh_from_db()
        assert task.project_id == target.pk

    def test_unknown_project(self, task_service, make_task):
        task = make_task()

        with pytest.raises(InvalidOperation):
            task_service.change_project(task.pk, 4242)

    def test_unknown_task(self, task_service, make_project):
        with pytest.raises(InvalidOperation):
            task_service.change_project(4242, make_project().pk)

    @pytest.mark.parametrize('task_id, project_id', [(0, 1), (1, 0), (-1, -1)])
    def test_non_positive_ids_fail_before_store_access(self, task_service, django_assert_num_queries,
                                                        task_id, project_id):
        with django_assert_num_queries(0):
            with pytest.raises(InvalidArgument):
                task_service.change_project(task_id, project_id)
