# sales/serializers/report.py

"""
Report shapes (documentation only; the report service already returns
plain dicts).
"""

from rest_framework import serializers


class TopProductSerializer(serializers.Serializer):
    nama = serializers.CharField()
    qty_terjual = serializers.IntegerField()


class SalesReportSerializer(serializers.Serializer):
    total_revenue = serializers.IntegerField()
    total_transaksi = serializers.IntegerField()
    produk_terlaris = TopProductSerializer(allow_null=True)


class ReportRangeQuerySerializer(serializers.Serializer):
    start_date = serializers.DateField(format="%Y-%m-%d", input_formats=["%Y-%m-%d"])
    end_date = serializers.DateField(format="%Y-%m-%d", input_formats=["%Y-%m-%d"])

    def validate(self, attrs):
        if attrs["end_date"] < attrs["start_date"]:
            raise serializers.ValidationError("end_date must not be before start_date")
        return attrs
