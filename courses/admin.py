from django.contrib import admin

from .models import Course, Enrolment


class EnrolmentInline(admin.TabularInline):
    model = Enrolment
    extra = 0
    raw_id_fields = ("student",)


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("name", "teacher", "created_at", "updated_at")
    search_fields = ("name", "title", "description", "teacher__username")
    inlines = [EnrolmentInline]

    def get_readonly_fields(self, request, obj=None):
        # Ownership is fixed once the course exists
        return ("teacher",) if obj else ()


@admin.register(Enrolment)
class EnrolmentAdmin(admin.ModelAdmin):
    list_display = ("course", "student", "created_at")
    search_fields = ("course__name", "student__username")
