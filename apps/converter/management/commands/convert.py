from django.core.management.base import BaseCommand, CommandError

from apps.converter.application.conversions import (
    MissingField,
    build_conversion_input,
    run_conversion,
)
from apps.converter.domain.exceptions import InvalidAmount
from apps.converter.domain.models import ConversionBatch


class Command(BaseCommand):
    help = 'Convert an amount into one currency or into all main currencies'

    def add_arguments(self, parser):
        parser.add_argument(
            '--from',
            dest='source',
            type=str,
            required=True,
            help='Source currency code, e.g. USD'
        )
        parser.add_argument(
            '--to',
            dest='target',
            type=str,
            default='',
            help='Target currency code (ignored with --all)'
        )
        parser.add_argument(
            '--amount',
            type=str,
            default='',
            help='Amount to convert (defaults to 1.0)'
        )
        parser.add_argument(
            '--all',
            dest='all_currencies',
            action='store_true',
            help='Convert into every main currency'
        )

    def handle(self, **options):
        try:
            conversion = build_conversion_input(
                options['amount'],
                options['source'],
                options['target'],
                options['all_currencies'],
                source_field='--from',
                target_field='--to',
            )
        except (InvalidAmount, MissingField) as e:
            raise CommandError(str(e))

        outcome = run_conversion(conversion)

        if isinstance(outcome, ConversionBatch):
            for result in outcome:
                if result.succeeded:
                    self.stdout.write(f"{result.target.code}: {result.text}")
                else:
                    self.stdout.write(self.style.WARNING(f"{result.target.code}: unavailable ({result.reason})"))

            if outcome.failures:
                self.stdout.write(
                    self.style.WARNING(f"{len(outcome.failures)} of {len(outcome)} conversions failed")
                )
            return

        if not outcome.succeeded:
            raise CommandError(f"Conversion failed: {outcome.reason}")

        self.stdout.write(self.style.SUCCESS(outcome.text))
