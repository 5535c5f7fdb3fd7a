# products/views/base.py

"""
ENVELOPED CRUD VIEWSET

ModelViewSet that answers in the project envelope
({status, message, data}) and soft-deletes instead of removing rows.

Subclasses set `label` ("Product", "Category") which is used to build
the human messages ("Product retrieved successfully", ...).
"""

from django.http import Http404
from rest_framework import status, viewsets

from backend.api import api_response, failed_response


class EnvelopeModelViewSet(viewsets.ModelViewSet):
    label = "Item"
    label_plural = "Items"

    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    def get_object(self):
        lookup = self.kwargs.get(self.lookup_field)
        if not str(lookup).isdigit():
            raise InvalidLookup()
        return super().get_object()

    def handle_exception(self, exc):
        if isinstance(exc, InvalidLookup):
            return failed_response(
                message=f"Invalid {self.label} ID",
                http_status=status.HTTP_400_BAD_REQUEST,
            )
        if isinstance(exc, Http404):
            return failed_response(
                message=f"{self.label} not found",
                http_status=status.HTTP_404_NOT_FOUND,
            )
        return super().handle_exception(exc)

    def list(self, request, *args, **kwargs):
        qs = self.filter_queryset(self.get_queryset())
        data = self.get_serializer(qs, many=True).data
        return api_response(message=f"{self.label_plural} retrieved successfully", data=data)

    def retrieve(self, request, *args, **kwargs):
        data = self.get_serializer(self.get_object()).data
        return api_response(message=f"{self.label} retrieved successfully", data=data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        return api_response(
            message=f"{self.label} created successfully",
            data=serializer.data,
            http_status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        # PUT only touches the fields that were sent.
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        return api_response(message=f"{self.label} updated successfully", data=serializer.data)

    def destroy(self, request, *args, **kwargs):
        self.get_object().soft_delete()
        return api_response(message=f"{self.label} deleted successfully")


class InvalidLookup(Exception):
    pass
