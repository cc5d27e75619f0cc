from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import User


@admin.register(User)
class AccountUserAdmin(UserAdmin):
    list_display = ('username', 'email', 'name', 'admin', 'curator')
    fieldsets = UserAdmin.fieldsets + (
        ('Replication Hub', {'fields': ('name', 'admin', 'curator')}),
    )
