import logging

from django.http import HttpResponse
from django.template import TemplateDoesNotExist, TemplateSyntaxError
from django.template.loader import render_to_string

from apps.converter.domain.exceptions import RenderingFailure


logger = logging.getLogger(__name__)


def render_page(request, template_name: str, context: dict, status: int = 200) -> HttpResponse:
    """
    Render a converter template.

    Raises:
        RenderingFailure: the template is missing or cannot be compiled
    """
    try:
        content = render_to_string(template_name, context, request=request)
    except (TemplateDoesNotExist, TemplateSyntaxError) as e:
        logger.error("Cannot render %s: %s", template_name, e)
        raise RenderingFailure(f"Cannot render {template_name}: {e}") from e

    return HttpResponse(content, status=status)
