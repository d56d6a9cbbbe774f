from django.contrib import admin

from .models import Material


@admin.register(Material)
class MaterialAdmin(admin.ModelAdmin):
    list_display = ("title", "course", "uploaded_by", "size_bytes", "mime", "created_at")
    list_select_related = ("course", "uploaded_by")
    search_fields = ("title", "file", "course__name")
