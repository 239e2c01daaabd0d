import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('start_date', models.DateField()),
                ('complete_date', models.DateField()),
                ('priority', models.IntegerField(validators=[django.core.validators.MaxValueValidator(5)])),
                ('status', models.IntegerField(choices=[(0, 'NotStarted'), (1, 'Active'), (2, 'Completed')], default=0)),
            ],
            options={
                'db_table': 'Projects',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Task',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True, default='')),
                ('priority', models.IntegerField(validators=[django.core.validators.MaxValueValidator(5)])),
                ('status', models.IntegerField(choices=[(0, 'ToDo'), (1, 'InProgress'), (2, 'Done')], default=0)),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tasks', to='tracker_app.project')),
            ],
            options={
                'db_table': 'Tasks',
                'ordering': ['id'],
            },
        ),
    ]
