# tracker_app/models.py
from django.core.validators import MaxValueValidator
from django.db import models

# Priorities are constrained to values below 6
MAX_PRIORITY = 5


class ProjectStatus(models.IntegerChoices):
    NOT_STARTED = 0, 'NotStarted'
    ACTIVE = 1, 'Active'
    COMPLETED = 2, 'Completed'


class TaskStatus(models.IntegerChoices):
    TO_DO = 0, 'ToDo'
    IN_PROGRESS = 1, 'InProgress'
    DONE = 2, 'Done'


class Project(models.Model):
    name = models.CharField(max_length=200)
    start_date = models.DateField()
    complete_date = models.DateField()
    priority = models.IntegerField(validators=[MaxValueValidator(MAX_PRIORITY)])
    status = models.IntegerField(choices=ProjectStatus.choices, default=ProjectStatus.NOT_STARTED)

    class Meta:
        db_table = 'Projects'
        ordering = ['id']

    def __str__(self):
        return self.name


class Task(models.Model):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='')
    priority = models.IntegerField(validators=[MaxValueValidator(MAX_PRIORITY)])
    status = models.IntegerField(choices=TaskStatus.choices, default=TaskStatus.TO_DO)
    project = models.ForeignKey(
        Project, on_delete=models.CASCADE, related_name='tasks'
    )

    class Meta:
        db_table = 'Tasks'
        ordering = ['id']

    def __str__(self):
        return self.name
