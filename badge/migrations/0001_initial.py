import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Badge',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('slug', models.SlugField(unique=True)),
                ('name', models.CharField(max_length=100, unique=True, verbose_name='徽章名称')),
                ('description', models.CharField(max_length=255, verbose_name='获得条件')),
                ('icon_url', models.CharField(max_length=255, verbose_name='图标')),
                ('badge_type', models.CharField(choices=[('PARTICIPATION', 'Participation'), ('COMPETITION_MILESTONE', 'Competition milestone'), ('SPECIAL_ACHIEVEMENT', 'Special achievement'), ('PROFILE_COMPLETION', 'Profile completion')], max_length=30)),
                ('requirement', models.PositiveIntegerField(blank=True, null=True, verbose_name='数量要求')),
            ],
            options={
                'verbose_name': '徽章',
                'db_table': 'sys_badge',
            },
        ),
        migrations.CreateModel(
            name='UserBadge',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('awarded_at', models.DateTimeField(auto_now_add=True)),
                ('badge', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='holders', to='badge.badge')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='badges', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': '用户徽章',
                'db_table': 'sys_user_badge',
                'ordering': ['-awarded_at'],
                'constraints': [models.UniqueConstraint(fields=('user', 'badge'), name='unique_badge_per_user')],
            },
        ),
    ]
