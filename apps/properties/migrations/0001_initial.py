import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Property',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(help_text='Listing headline.', max_length=200)),
                ('location', models.CharField(db_index=True, help_text="Locality and city, e.g. 'Golf Course Road, Gurgaon'.", max_length=255)),
                ('city', models.CharField(blank=True, default='', help_text='City used for grouping listings.', max_length=100)),
                ('price', models.CharField(help_text='Display price, plain or crore/lakh shorthand.', max_length=50)),
                ('price_amount', models.PositiveBigIntegerField(db_index=True, default=0, help_text='Price in rupees, parsed from the display price.')),
                ('image_url', models.URLField(blank=True, default='', max_length=500)),
                ('description', models.TextField(blank=True, default='')),
                ('enquiry_count', models.PositiveIntegerField(default=0, help_text='Number of leads that enquired about this listing.')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name_plural': 'properties',
                'db_table': 'properties',
                'ordering': ['-created_at'],
            },
        ),
    ]
