# -*- coding: utf-8 -*-
"""card bundle viewset

CRUD on /bundles. A bundle can be created together with its cards, and deleting it deletes them too.
"""
import logging

from rest_framework import filters
from rest_framework.viewsets import ModelViewSet

from flashcards.models.cardbundle import CardBundle
from flashcards.pagination import StandardResultsSetPagination
from flashcards.serializers import CardBundleModelSerializer, CardBundleDetailSerializer
from flashcards.viewsets.utils import _handle_exception

logger = logging.getLogger(__name__)


class CardBundleViewSet(ModelViewSet):
    serializer_class = CardBundleModelSerializer
    pagination_class = StandardResultsSetPagination
    filter_backends = [filters.OrderingFilter, filters.SearchFilter]
    ordering_fields = ['id', 'title']
    ordering = ['-id']
    search_fields = ['title', 'description']

    def get_queryset(self):
        return CardBundle.objects.get_by_keyword(**self.request.query_params)

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return CardBundleDetailSerializer
        return super().get_serializer_class()

    def perform_destroy(self, instance):
        logger.info(f"Deleting card bundle ({instance.id}) '{instance.title}' with {instance.cards.count()} cards")
        super().perform_destroy(instance)

    def handle_exception(self, exc):
        response = _handle_exception(exc)
        if response is not None:
            return response
        return super(CardBundleViewSet, self).handle_exception(exc)
