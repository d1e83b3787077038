from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Season',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('year', models.IntegerField(unique=True)),
            ],
            options={'ordering': ['-year']},
        ),
        migrations.CreateModel(
            name='Circuit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=150)),
                ('location', models.CharField(blank=True, default='', max_length=150)),
            ],
            options={'ordering': ['name']},
        ),
        migrations.CreateModel(
            name='Constructor',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=150)),
                ('nationality', models.CharField(blank=True, default='', max_length=80)),
            ],
            options={'ordering': ['name']},
        ),
        migrations.CreateModel(
            name='Driver',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=150)),
                ('nationality', models.CharField(blank=True, default='', max_length=80)),
                ('number', models.CharField(blank=True, default='', max_length=10)),
                ('constructor', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='drivers', to='championship.constructor')),
            ],
            options={'ordering': ['name']},
        ),
        migrations.CreateModel(
            name='Race',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('gp_number', models.IntegerField()),
                ('name', models.CharField(max_length=150)),
                ('date', models.DateField(blank=True, null=True)),
                ('circuit', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='races', to='championship.circuit')),
                ('season', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='races', to='championship.season')),
            ],
            options={
                'ordering': ['season__year', 'gp_number'],
                'unique_together': {('season', 'gp_number')},
            },
        ),
        migrations.CreateModel(
            name='Result',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('position', models.PositiveIntegerField()),
                ('points', models.DecimalField(decimal_places=2, default=0, max_digits=5)),
                ('laps', models.IntegerField(blank=True, null=True)),
                ('time', models.CharField(blank=True, max_length=100, null=True)),
                ('withdrawn', models.BooleanField(default=False)),
                ('withdrawal_reason', models.CharField(blank=True, max_length=200, null=True)),
                ('driver', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='results', to='championship.driver')),
                ('race', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='results', to='championship.race')),
            ],
            options={
                'ordering': ['race', 'position'],
                'unique_together': {('race', 'driver')},
            },
        ),
        migrations.CreateModel(
            name='SprintResult',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('position', models.PositiveIntegerField()),
                ('points', models.DecimalField(decimal_places=2, default=0, max_digits=5)),
                ('laps', models.IntegerField(blank=True, null=True)),
                ('time', models.CharField(blank=True, max_length=100, null=True)),
                ('withdrawn', models.BooleanField(default=False)),
                ('withdrawal_reason', models.CharField(blank=True, max_length=200, null=True)),
                ('driver', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sprint_results', to='championship.driver')),
                ('race', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sprint_results', to='championship.race')),
            ],
            options={
                'ordering': ['race', 'position'],
                'unique_together': {('race', 'driver')},
            },
        ),
    ]
