import django.db.models.deletion
import django_fsm
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Competition',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='竞赛名称')),
                ('description', models.TextField(blank=True, max_length=1000, null=True, verbose_name='竞赛简介')),
                ('event_date', models.DateTimeField(verbose_name='举办日期')),
                ('location', models.CharField(blank=True, max_length=200, null=True, verbose_name='举办地点')),
                ('organizer', models.CharField(blank=True, max_length=200, null=True, verbose_name='主办方')),
                ('competition_type', models.CharField(choices=[('GENERAL', 'General'), ('ARMOR', 'Armor'), ('CLOTH', 'Cloth'), ('SINGING', 'Singing')], max_length=20, verbose_name='竞赛类型')),
                ('rivalry_type', models.CharField(choices=[('SOLO', 'Solo'), ('DUO', 'Duo'), ('GROUP', 'Group')], max_length=20, verbose_name='参赛形式')),
                ('level', models.CharField(choices=[('BARANGAY', 'Barangay'), ('LOCAL', 'Local'), ('REGIONAL', 'Regional'), ('NATIONAL', 'National'), ('WORLDWIDE', 'Worldwide')], max_length=20, verbose_name='竞赛级别')),
                ('logo_url', models.URLField(blank=True, max_length=500, null=True, verbose_name='Logo')),
                ('event_url', models.URLField(blank=True, max_length=500, null=True, verbose_name='官网')),
                ('facebook_url', models.URLField(blank=True, max_length=500, null=True)),
                ('instagram_url', models.URLField(blank=True, max_length=500, null=True)),
                ('reference_links', models.TextField(blank=True, null=True, verbose_name='参考链接')),
                ('status', django_fsm.FSMField(choices=[('DRAFT', '草稿'), ('SUBMITTED', '待审核'), ('ACCEPTED', '已通过'), ('ONGOING', '进行中'), ('COMPLETED', '已结束'), ('REJECTED', '已驳回'), ('CANCELLED', '已取消')], default='SUBMITTED', max_length=50, verbose_name='审核状态')),
                ('reviewed_at', models.DateTimeField(blank=True, null=True)),
                ('rejection_reason', models.TextField(blank=True, null=True, verbose_name='驳回原因')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('reviewed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='reviewed_competitions', to=settings.AUTH_USER_MODEL, verbose_name='审核人')),
                ('submitted_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='submitted_competitions', to=settings.AUTH_USER_MODEL, verbose_name='提交者')),
            ],
            options={
                'verbose_name': '竞赛信息',
                'db_table': 'sys_competition',
                'ordering': ['-event_date'],
            },
        ),
    ]
