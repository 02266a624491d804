import os

from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.core.management import call_command
from django.core.management.base import BaseCommand

from badge.services import initialize_badges
from userManage.models import ADMIN_GROUP, MODERATOR_GROUP


class Command(BaseCommand):
    help = '初始化项目：执行迁移、创建角色组、徽章目录和初始管理员'

    def add_arguments(self, parser):
        parser.add_argument('--skip-migrate', action='store_true', help='不执行数据库迁移')

    def handle(self, *args, **options):
        User = get_user_model()

        # 1. 执行数据库迁移
        if not options['skip_migrate']:
            self.stdout.write(self.style.SUCCESS('Running migrations...'))
            call_command('migrate')

        # 2. 创建角色组
        for role_name in [ADMIN_GROUP, MODERATOR_GROUP]:
            group, created = Group.objects.get_or_create(name=role_name)
            if created:
                self.stdout.write(f'Created group: {role_name}')
            else:
                self.stdout.write(f'Group {role_name} already exists')

        # 3. 徽章目录
        created_badges = initialize_badges()
        for name in created_badges:
            self.stdout.write(self.style.SUCCESS(f'Created badge: {name}'))

        # 4. 初始管理员（用户名/密码来自环境变量）
        username = os.environ.get('COSBAII_ADMIN_USERNAME')
        password = os.environ.get('COSBAII_ADMIN_PASSWORD')
        if username and password:
            if User.objects.filter(username=username).exists():
                self.stdout.write(self.style.WARNING(f'User {username} already exists, skipped'))
            else:
                admin = User.objects.create_user(username=username, password=password, name='Cosbaii Admin')
                admin.groups.add(Group.objects.get(name=ADMIN_GROUP))
                self.stdout.write(self.style.SUCCESS(f'Administrator {username} created'))

        self.stdout.write(self.style.SUCCESS('Project initialised.'))
