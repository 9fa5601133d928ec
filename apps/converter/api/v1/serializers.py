"""
Serializers for the converter bounded context.
Read-only: they turn domain value objects into API payloads.
"""

from rest_framework import serializers


class CurrencySerializer(serializers.Serializer):
    code = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)


class ConversionResultSerializer(serializers.Serializer):
    source_currency = serializers.CharField(source="request.source.code", read_only=True)
    exchanged_currency = serializers.CharField(source="request.target.code", read_only=True)
    amount = serializers.SerializerMethodField()
    outcome = serializers.CharField(source="outcome.value", read_only=True)
    payload = serializers.CharField(source="text", read_only=True, allow_null=True)
    reason = serializers.CharField(read_only=True, allow_null=True)

    def get_amount(self, obj) -> str:
        return format(obj.request.amount, "f")

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if not instance.succeeded:
            data["payload"] = None
        return data


class ConversionBatchSerializer(serializers.Serializer):
    source_currency = serializers.CharField(source="source.code", read_only=True)
    amount = serializers.SerializerMethodField()
    results = ConversionResultSerializer(many=True, read_only=True)
    failures = serializers.SerializerMethodField()

    def get_amount(self, obj) -> str:
        return format(obj.amount, "f")

    def get_failures(self, obj) -> int:
        return len(obj.failures)
