from django.contrib import admin

from events.models import Category, Event


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["name"]
    search_fields = ["name"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "category", "paid", "event_date"]
    list_filter = ["category", "paid"]
    search_fields = ["title", "annotation"]
