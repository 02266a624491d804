import django.db.models.deletion
import django.utils.timezone
import django_fsm
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('competitions', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Credential',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('cosplay_title', models.CharField(max_length=200, verbose_name='作品标题')),
                ('character_name', models.CharField(blank=True, max_length=200, null=True, verbose_name='角色名')),
                ('series_name', models.CharField(blank=True, max_length=200, null=True, verbose_name='作品出处')),
                ('description', models.TextField(blank=True, max_length=5000, null=True)),
                ('image_url', models.URLField(blank=True, max_length=500, null=True, verbose_name='作品照片')),
                ('video_url', models.URLField(blank=True, max_length=500, null=True, verbose_name='视频链接')),
                ('position', models.CharField(default='PARTICIPANT', max_length=50, verbose_name='名次')),
                ('category', models.CharField(blank=True, max_length=200, null=True, verbose_name='参赛组别')),
                ('is_team', models.BooleanField(default=False)),
                ('team_members', models.TextField(blank=True, max_length=1000, null=True)),
                ('contact_email', models.EmailField(blank=True, max_length=254, null=True)),
                ('contact_phone', models.CharField(blank=True, max_length=50, null=True)),
                ('status', django_fsm.FSMField(choices=[('PENDING', '待审核'), ('APPROVED', '已通过'), ('REJECTED', '已驳回')], default='PENDING', max_length=50, verbose_name='审核状态')),
                ('reviewed_at', models.DateTimeField(blank=True, null=True)),
                ('rejection_reason', models.TextField(blank=True, null=True, verbose_name='驳回原因')),
                ('order', models.IntegerField(default=0, verbose_name='展示顺序')),
                ('submitted_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='提交时间')),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('competition', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='participants', to='competitions.competition', verbose_name='所属竞赛')),
                ('reviewed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='reviewed_credentials', to=settings.AUTH_USER_MODEL, verbose_name='审核人')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='credentials', to=settings.AUTH_USER_MODEL, verbose_name='参赛用户')),
            ],
            options={
                'verbose_name': '参赛记录',
                'db_table': 'sys_credential',
                'ordering': ['order', '-submitted_at'],
                'constraints': [models.UniqueConstraint(fields=('user', 'competition'), name='unique_credential_per_competition')],
            },
        ),
    ]
