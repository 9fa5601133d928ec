"""
HTML pages: the conversion form and the conversion results.

GET  /view/     Display form
POST /convert/  Convert and display results
"""

import logging
from functools import wraps

from django.http import HttpResponseServerError
from django.views.decorators.http import require_GET, require_POST

from apps.converter.application.conversions import (
    MissingField,
    build_conversion_input,
    run_conversion,
)
from apps.converter.domain.currencies import main_currencies
from apps.converter.domain.exceptions import InvalidAmount, RenderingFailure
from apps.converter.domain.models import ConversionBatch
from apps.converter.web.rendering import render_page


logger = logging.getLogger(__name__)

FORM_TEMPLATE = "converter/view.html"
RESULT_TEMPLATE = "converter/edit.html"


def handle_rendering_failure(view):
    @wraps(view)
    def wrapper(request, *args, **kwargs):
        try:
            return view(request, *args, **kwargs)
        except RenderingFailure as e:
            return HttpResponseServerError(str(e), content_type="text/plain")
    return wrapper


def form_context(form_data: dict | None = None, error: str | None = None) -> dict:
    return {
        "title": "Currency Converter",
        "currencies": main_currencies(),
        "form_data": form_data or {},
        "error": error,
    }


@require_GET
@handle_rendering_failure
def view_form(request):
    return render_page(request, FORM_TEMPLATE, form_context())


@require_POST
@handle_rendering_failure
def convert(request):
    form_data = {
        "amount": request.POST.get("amount", ""),
        "currency1": request.POST.get("currency1", ""),
        "currency2": request.POST.get("currency2", ""),
        "allCurrencies": request.POST.get("allCurrencies", ""),
    }

    try:
        conversion = build_conversion_input(
            form_data["amount"],
            form_data["currency1"],
            form_data["currency2"],
            form_data["allCurrencies"],
            source_field="currency1",
            target_field="currency2",
        )
    except (InvalidAmount, MissingField) as e:
        logger.info("Rejected conversion form: %s", e)
        return render_page(request, FORM_TEMPLATE, form_context(form_data, str(e)), status=400)

    outcome = run_conversion(conversion)

    if isinstance(outcome, ConversionBatch):
        context = {
            "title": "Converted",
            "source": outcome.source,
            "amount": outcome.amount,
            "batch": outcome,
            "result": None,
        }
        return render_page(request, RESULT_TEMPLATE, context)

    context = {
        "title": "Converted",
        "source": conversion.source,
        "amount": conversion.amount,
        "batch": None,
        "result": outcome,
    }
    return render_page(request, RESULT_TEMPLATE, context, status=200 if outcome.succeeded else 502)
