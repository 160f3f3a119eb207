"""
Filter construction for the product list endpoint.
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional

from django.db.models import Q
from django.utils.dateparse import parse_date, parse_datetime

from .exceptions import ProductValidationError
from .models import Product


def parse_date_param(value):
    """
    Parse an ISO date query parameter.

    Accepts ``YYYY-MM-DD`` as well as a full ISO datetime, whose date part
    is used. Returns None for a well-formed but impossible date or for
    anything that is not ISO formatted.
    """
    value = value.strip()
    try:
        parsed = parse_date(value)
        if parsed is None:
            parsed_dt = parse_datetime(value)
            parsed = parsed_dt.date() if parsed_dt else None
    except ValueError:
        return None
    return parsed


@dataclass(frozen=True)
class ProductFilter:
    """
    Restrictions applied when listing products.

    Every field is optional; an empty filter matches every product.
    The date bounds are inclusive.
    """
    status: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None

    @classmethod
    def from_query_params(cls, params):
        """
        Build a filter from ``status``, ``startDate`` and ``endDate``.

        Blank parameters are ignored. Raises ProductValidationError when
        the status is unknown or a date cannot be parsed.
        """
        errors = {}
        status = (params.get('status') or '').strip().lower() or None
        if status is not None and status not in dict(Product.STATUS_CHOICES):
            errors['status'] = [
                f'Invalid status. Choose from: {", ".join(dict(Product.STATUS_CHOICES).keys())}'
            ]

        bounds = {}
        for param, field in (('startDate', 'date_from'), ('endDate', 'date_to')):
            raw = (params.get(param) or '').strip()
            if not raw:
                continue
            parsed = parse_date_param(raw)
            if parsed is None:
                errors[param] = [f'"{raw}" is not a valid date. Use YYYY-MM-DD.']
            else:
                bounds[field] = parsed

        if errors:
            raise ProductValidationError(errors, message="Invalid filter")

        return cls(status=status, **bounds)

    @property
    def is_empty(self):
        return self.status is None and self.date_from is None and self.date_to is None

    def to_q(self):
        """Translate the filter into an ORM lookup"""
        q = Q()
        if self.status is not None:
            q &= Q(status=self.status)
        if self.date_from is not None:
            q &= Q(date__gte=self.date_from)
        if self.date_to is not None:
            q &= Q(date__lte=self.date_to)
        return q
