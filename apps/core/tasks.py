"""
Celery tasks for data ingestion.

Reads properties.xlsx using pandas and upserts listings with
idempotency guarantees.
"""

import logging
from pathlib import Path

import pandas as pd
from celery import shared_task
from django.conf import settings
from django.db import IntegrityError

from apps.core.exceptions import DataIngestionError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('title', 'location', 'price')
OPTIONAL_COLUMNS = ('city', 'image_url', 'description')


def _cell_text(row, column: str) -> str:
    """Read a cell as stripped text; blanks and NaN become ''."""
    value = row.get(column, '')
    if pd.isna(value):
        return ''
    # Excel hands whole-number prices back as floats
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


@shared_task(
    bind=True,
    name='core.ingest_property_data',
    max_retries=3,
    default_retry_delay=10,
)
def ingest_property_data(self):
    """
    Ingest property listings from properties.xlsx.

    Reads the Excel file, validates each row, and upserts listings
    keyed on (title, location) via update_or_create. Enquiry counts of
    existing listings are left untouched.

    This task is idempotent and safe to run multiple times.
    """
    from apps.properties.models import Property

    file_path = Path(settings.DATA_DIR) / 'properties.xlsx'

    if not file_path.exists():
        logger.error("Property data file not found: %s", file_path)
        return {'status': 'error', 'message': f'File not found: {file_path}'}

    try:
        logger.info("Starting property data ingestion from %s", file_path)

        df = pd.read_excel(file_path)
        logger.info("Read %d rows from properties.xlsx", len(df))

        # Normalize column names
        df.columns = [
            str(col).strip().lower().replace(' ', '_') for col in df.columns
        ]

        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise DataIngestionError(
                f"properties.xlsx is missing columns: {', '.join(missing)}"
            )

        created_count = 0
        updated_count = 0
        error_count = 0

        for index, row in df.iterrows():
            try:
                title = _cell_text(row, 'title')
                location = _cell_text(row, 'location')

                if not title or not location:
                    logger.warning(
                        "Row %d: missing title or location, skipping", index
                    )
                    error_count += 1
                    continue

                defaults = {'price': _cell_text(row, 'price')}
                for column in OPTIONAL_COLUMNS:
                    defaults[column] = _cell_text(row, column)

                # Property.save() parses the price strictly
                _, created = Property.objects.update_or_create(
                    title=title,
                    location=location,
                    defaults=defaults,
                )

                if created:
                    created_count += 1
                else:
                    updated_count += 1

            except (ValueError, TypeError, IntegrityError) as e:
                logger.warning(
                    "Row %d: failed to process: %s", index, str(e)
                )
                error_count += 1
                continue

        result = {
            'status': 'success',
            'total_rows': len(df),
            'created': created_count,
            'updated': updated_count,
            'errors': error_count,
        }
        logger.info("Property data ingestion complete: %s", result)
        return result

    except DataIngestionError as exc:
        logger.error("Property data ingestion aborted: %s", exc)
        return {'status': 'error', 'message': str(exc)}

    except Exception as exc:
        logger.exception("Property data ingestion failed")
        raise self.retry(exc=exc)
