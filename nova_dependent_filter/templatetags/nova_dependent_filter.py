from django import template
from django.urls import reverse
from django.utils.html import format_html_join

from nova_dependent_filter.assets import scripts
from nova_dependent_filter.signals import serving_nova

register = template.Library()


@register.simple_tag(takes_context=True)
def nova_scripts(context):
    """Render a ``<script>`` tag for each registered panel script.

    Sends ``serving_nova`` first so listeners can register their scripts
    for the page being rendered.
    """
    serving_nova.send(sender=None, request=context.get("request"))
    return format_html_join(
        "\n",
        '<script src="{}" data-script="{}"></script>',
        (
            (reverse("nova.scripts", kwargs={"name": entry.name}), entry.name)
            for entry in scripts.all()
        ),
    )
