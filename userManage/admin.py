from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import User


@admin.register(User)
class CosbaiiUserAdmin(UserAdmin):
    fieldsets = UserAdmin.fieldsets + (
        ("Cosbaii", {'fields': ('name',)}),
    )
    list_display = ('username', 'name', 'email', 'is_staff')
