from django.contrib import admin
from django.utils.html import format_html

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """
    Admin interface for Product model.
    """
    list_display = ['title', 'status', 'active', 'date', 'image_preview', 'created_at']
    list_filter = ['status', 'date', 'created_at']
    search_fields = ['title', 'description']
    list_editable = ['status']
    readonly_fields = ['id', 'image_preview', 'created_at', 'updated_at']
    ordering = ['-created_at']
    date_hierarchy = 'date'

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'title', 'description')
        }),
        ('Image', {
            'fields': ('image_url', 'image_preview')
        }),
        ('Status', {
            'fields': ('status', 'date')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['mark_as_active', 'mark_as_inactive']

    @admin.display(boolean=True, description='Active')
    def active(self, obj):
        return obj.is_active

    def image_preview(self, obj):
        """Show a thumbnail of the hosted image"""
        if not obj.image_url:
            return '-'
        return format_html('<img src="{}" style="max-height: 60px;" />', obj.image_url)
    image_preview.short_description = 'Image'

    # Admin actions
    @admin.action(description='Mark selected products as active')
    def mark_as_active(self, request, queryset):
        updated = queryset.update(status=Product.STATUS_ACTIVE)
        self.message_user(request, f'{updated} products marked as active.')

    @admin.action(description='Mark selected products as inactive')
    def mark_as_inactive(self, request, queryset):
        updated = queryset.update(status=Product.STATUS_INACTIVE)
        self.message_user(request, f'{updated} products marked as inactive.')
