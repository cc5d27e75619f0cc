import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Journal',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, unique=True)),
                ('issn', models.CharField(blank=True, default='', max_length=20)),
            ],
        ),
        migrations.CreateModel(
            name='Article',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('doi', models.CharField(max_length=255, unique=True)),
                ('title', models.TextField()),
                ('publication_date', models.DateField(blank=True, db_index=True, null=True)),
                ('abstract', models.TextField(blank=True, null=True)),
                ('repeatability', models.FloatField(default=0.0)),
                ('materials', models.FloatField(default=0.0)),
                ('quality_of_stats', models.FloatField(default=0.0)),
                ('disclosure', models.FloatField(default=0.0)),
                ('authors_denormalized', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('journal', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='articles', to='ResearchApp.journal')),
            ],
            options={
                'ordering': ['-publication_date', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Study',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('n', models.IntegerField(blank=True, null=True)),
                ('power', models.FloatField(blank=True, null=True)),
                ('independent_variables', models.JSONField(blank=True, default=list)),
                ('dependent_variables', models.JSONField(blank=True, default=list)),
                ('effect_size', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('article', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='studies', to='ResearchApp.article')),
            ],
            options={
                'verbose_name': 'Study',
                'verbose_name_plural': 'Studies',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Finding',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('url', models.URLField(max_length=1000)),
                ('study', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='findings', to='ResearchApp.study')),
            ],
            options={
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Replication',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('closeness', models.FloatField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('replicating_study', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='replication_of', to='ResearchApp.study')),
                ('study', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='replications', to='ResearchApp.study')),
            ],
            options={
                'ordering': ['id'],
            },
        ),
    ]
