from django.contrib import admin

from apps.properties.models import Property


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    list_display = (
        'title', 'location', 'city', 'price', 'formatted_price',
        'enquiry_count', 'created_at',
    )
    list_filter = ('city', 'created_at')
    search_fields = ('title', 'location', 'city')
    readonly_fields = ('price_amount', 'enquiry_count', 'created_at', 'updated_at')
