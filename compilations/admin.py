from django.contrib import admin

from compilations.models import Compilation, CompilationEvent


class CompilationEventInline(admin.TabularInline):
    model = CompilationEvent
    extra = 1


@admin.register(Compilation)
class CompilationAdmin(admin.ModelAdmin):
    list_display = ["title", "pinned", "created_at"]
    list_filter = ["pinned"]
    search_fields = ["title"]
    inlines = [CompilationEventInline]
