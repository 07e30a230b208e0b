# -*- coding: utf-8 -*-
"""card viewsets

/cards is a read-only view across every bundle, filterable by bundle id and card text.
/bundles/<bundle_pk>/cards is full CRUD on the cards owned by one bundle.
"""
import logging

from rest_framework import filters
from rest_framework.generics import get_object_or_404
from rest_framework.viewsets import ModelViewSet, ReadOnlyModelViewSet

from flashcards.models.card import Card
from flashcards.models.cardbundle import CardBundle
from flashcards.pagination import StandardResultsSetPagination
from flashcards.serializers import CardModelSerializer
from flashcards.viewsets.utils import _handle_exception

logger = logging.getLogger(__name__)


class CardViewSet(ReadOnlyModelViewSet):
    serializer_class = CardModelSerializer
    pagination_class = StandardResultsSetPagination
    filter_backends = [filters.OrderingFilter, filters.SearchFilter]
    ordering_fields = ['id', 'bundle', 'front_text']
    ordering = ['id']
    search_fields = Card.get_base_fields()

    def get_queryset(self):
        return Card.objects.get_by_keyword(**self.request.query_params)

    def handle_exception(self, exc):
        response = _handle_exception(exc)
        if response is not None:
            return response
        return super(CardViewSet, self).handle_exception(exc)


class BundleCardViewSet(ModelViewSet):
    """cards of one bundle, routed as /bundles/<bundle_pk>/cards"""
    serializer_class = CardModelSerializer
    pagination_class = StandardResultsSetPagination
    filter_backends = [filters.OrderingFilter, filters.SearchFilter]
    ordering_fields = ['id', 'front_text']
    ordering = ['id']
    search_fields = Card.get_base_fields()

    def get_bundle(self) -> CardBundle:
        return get_object_or_404(CardBundle, pk=self.kwargs['bundle_pk'])

    def get_queryset(self):
        return Card.objects.filter(bundle=self.get_bundle())

    def perform_create(self, serializer):
        card = serializer.save(bundle=self.get_bundle())
        logger.info(f"Added card ({card.id}) to bundle ({card.bundle_id})")

    def handle_exception(self, exc):
        response = _handle_exception(exc)
        if response is not None:
            return response
        return super(BundleCardViewSet, self).handle_exception(exc)
