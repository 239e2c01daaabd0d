from django.db import transaction
from rest_framework import serializers

from .filters import ProjectSortingOrder, TaskSortingOrder
from .models import Project, ProjectStatus, Task, TaskStatus


class ChoiceNameField(serializers.ChoiceField):
    """
    Choice field for integer enumerations that is written and read by name.

    ``"Active"``, ``"active"`` and ``1`` are all accepted on input; output is
    always the name, so clients never have to know the stored integers.
    """

    def __init__(self, choices_enum, **kwargs):
        self.choices_enum = choices_enum
        super().__init__(choices=choices_enum.choices, **kwargs)

    def to_internal_value(self, data):
        # Names match regardless of case
        values_by_name = {label.lower(): value for value, label in self.choices_enum.choices}
        if isinstance(data, str) and data.lower() in values_by_name:
            return values_by_name[data.lower()]
        return super().to_internal_value(data)

    def to_representation(self, value):
        if value in ('', None):
            return value
        return self.choices_enum(value).label


class ProjectTaskSerializer(serializers.ModelSerializer):
    """A task as it appears nested inside its project."""
    description = serializers.CharField(allow_blank=True, required=False, default='')
    status = ChoiceNameField(TaskStatus, default=TaskStatus.TO_DO)

    class Meta:
        model = Task
        fields = ['id', 'name', 'description', 'priority', 'status']


class ProjectSerializer(serializers.ModelSerializer):
    status = ChoiceNameField(ProjectStatus, default=ProjectStatus.NOT_STARTED)
    tasks = ProjectTaskSerializer(many=True, required=False)

    class Meta:
        model = Project
        fields = ['id', 'name', 'start_date', 'complete_date', 'priority', 'status', 'tasks']

    def validate(self, attrs):
        if attrs['start_date'] >= attrs['complete_date']:
            raise serializers.ValidationError(
                {'complete_date': 'Complete date must be greater than start date.'}
            )
        return attrs

    def create(self, validated_data):
        # The project and any tasks submitted with it are stored together
        tasks_data = validated_data.pop('tasks', [])
        with transaction.atomic():
            project = Project.objects.create(**validated_data)
            for task_data in tasks_data:
                Task.objects.create(project=project, **task_data)
        return project

    def update(self, instance, validated_data):
        # Tasks are only changed through their own endpoints
        validated_data.pop('tasks', None)
        instance.name = validated_data['name']
        instance.start_date = validated_data['start_date']
        instance.complete_date = validated_data['complete_date']
        instance.priority = validated_data['priority']
        instance.status = validated_data['status']
        instance.save()
        return instance


class TaskSerializer(serializers.ModelSerializer):
    description = serializers.CharField(allow_blank=True, required=False, default='')
    status = ChoiceNameField(TaskStatus, default=TaskStatus.TO_DO)
    project_id = serializers.PrimaryKeyRelatedField(
        source='project',
        queryset=Project.objects.all(),
    )

    class Meta:
        model = Task
        fields = ['id', 'name', 'description', 'priority', 'status', 'project_id']


class ProjectQuerySerializer(serializers.Serializer):
    """Query-string filters accepted by GET /projects."""
    filterName = serializers.CharField(source='name', required=False, allow_blank=True, trim_whitespace=False)
    filterPriority = serializers.IntegerField(source='priority', required=False)
    filterStatus = ChoiceNameField(ProjectStatus, source='status', required=False)
    filterStartDate = serializers.DateField(source='start_date', required=False)
    filterEndDate = serializers.DateField(source='complete_date', required=False)
    sortBy = serializers.ChoiceField(choices=ProjectSortingOrder.choices, source='sort_by', required=False)


class TaskQuerySerializer(serializers.Serializer):
    """Query-string filters accepted by GET /tasks."""
    filterName = serializers.CharField(source='name', required=False, allow_blank=True, trim_whitespace=False)
    filterPriority = serializers.IntegerField(source='priority', required=False)
    filterStatus = ChoiceNameField(TaskStatus, source='status', required=False)
    sortBy = serializers.ChoiceField(choices=TaskSortingOrder.choices, source='sort_by', required=False)


class ChangeProjectQuerySerializer(serializers.Serializer):
    projectKey = serializers.IntegerField(source='project_id')
