"""
ViewSet for the converter API v1.
Exposes single and batch conversion as read-only GET actions.
"""

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.converter.api.v1.serializers import (
    ConversionBatchSerializer,
    ConversionResultSerializer,
    CurrencySerializer,
)
from apps.converter.application.conversions import (
    MissingField,
    build_conversion_input,
    get_aggregator,
)
from apps.converter.domain.currencies import main_currencies
from apps.converter.domain.exceptions import InvalidAmount


@extend_schema(tags=['Conversions'])
class ConversionViewSet(viewsets.ViewSet):

    @extend_schema(
        responses=CurrencySerializer(many=True),
        description="List the main currencies used for batch conversion"
    )
    @action(detail=False, methods=['get'], url_path='currencies')
    def currencies(self, request):
        serializer = CurrencySerializer(main_currencies(), many=True)
        return Response(serializer.data)

    @extend_schema(
        parameters=[
            OpenApiParameter("source_currency", OpenApiTypes.STR, required=True, description="Source currency code (e.g. USD)"),
            OpenApiParameter("exchanged_currency", OpenApiTypes.STR, required=True, description="Target currency code (e.g. CAD)"),
            OpenApiParameter("amount", OpenApiTypes.STR, description="Amount to convert (defaults to 1.0 when blank)"),
        ],
        responses=ConversionResultSerializer,
        description="Convert an amount from one currency to another"
    )
    @action(detail=False, methods=['get'], url_path='convert')
    def convert(self, request):
        """
        Convert an amount from one currency to another.
        Returns 502 with the failed result when the conversion service cannot answer.
        """
        try:
            conversion = build_conversion_input(
                request.query_params.get('amount'),
                request.query_params.get('source_currency'),
                request.query_params.get('exchanged_currency'),
            )
        except (InvalidAmount, MissingField) as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        result = get_aggregator().convert_one(conversion.source, conversion.target, conversion.amount)

        return Response(
            ConversionResultSerializer(result).data,
            status=status.HTTP_200_OK if result.succeeded else status.HTTP_502_BAD_GATEWAY
        )

    @extend_schema(
        parameters=[
            OpenApiParameter("source_currency", OpenApiTypes.STR, required=True, description="Source currency code (e.g. USD)"),
            OpenApiParameter("amount", OpenApiTypes.STR, description="Amount to convert (defaults to 1.0 when blank)"),
        ],
        responses=ConversionBatchSerializer,
        description="Convert an amount into every main currency. Failed targets are listed, not dropped."
    )
    @action(detail=False, methods=['get'], url_path='convert-all')
    def convert_all(self, request):
        try:
            conversion = build_conversion_input(
                request.query_params.get('amount'),
                request.query_params.get('source_currency'),
                all_currencies=True,
            )
        except (InvalidAmount, MissingField) as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        batch = get_aggregator().convert_all(conversion.source, conversion.amount)

        return Response(ConversionBatchSerializer(batch).data)
