from django.contrib import admin

from .models import Credential


@admin.register(Credential)
class CredentialAdmin(admin.ModelAdmin):
    list_display = ('cosplay_title', 'user', 'competition', 'position', 'status', 'order', 'submitted_at')
    list_filter = ('status', 'position')
    search_fields = ('cosplay_title', 'character_name', 'user__username', 'competition__name')
    list_select_related = ('user', 'competition')
    readonly_fields = ('status', 'reviewed_at', 'reviewed_by')
