from django.apps import AppConfig


class ConverterConfig(AppConfig):
    name = "apps.converter"
    label = "converter"
    verbose_name = "Currency converter"
