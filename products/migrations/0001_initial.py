# Generated manually for the initial Product table

from django.db import migrations, models
import products.models
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Opaque identifier assigned at creation', primary_key=True, serialize=False)),
                ('title', models.CharField(help_text='Product title', max_length=200, validators=[products.models.validate_not_blank])),
                ('description', models.TextField(blank=True, default='', help_text='Optional product description')),
                ('image_url', models.CharField(blank=True, default='', help_text='Public URL of the product image on the image host', max_length=500)),
                ('status', models.CharField(choices=[('active', 'Active'), ('inactive', 'Inactive')], help_text='Current product status', max_length=20)),
                ('date', models.DateField(help_text='Date the product was added to the catalog')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when product was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when product was last updated')),
            ],
            options={
                'verbose_name': 'Product',
                'verbose_name_plural': 'Products',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status'], name='product_status_idx'),
                    models.Index(fields=['date'], name='product_date_idx'),
                    models.Index(fields=['-created_at'], name='product_created_at_idx'),
                ],
            },
        ),
    ]
