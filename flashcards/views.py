import logging

from django.conf import settings
from django.http import JsonResponse
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.generics import get_object_or_404
from rest_framework.request import Request

from flashcards.exceptions import InvalidQueryParameter
from flashcards.models import CardBundle, Card
from flashcards.responses import JsonErrorResponse
from flashcards.serializers import CardModelSerializer

logger = logging.getLogger(__name__)

MAX_STUDY_CARDS = 100


def parse_study_count(query_params: dict) -> int:
    """
    Parse query parameters for study session size
    """
    count = str(query_params.get('count', settings.STUDY_SESSION_DEFAULT_COUNT))

    if not count.isdecimal() or int(count) == 0:
        raise InvalidQueryParameter('count', count, 'count must be a positive integer.')
    if int(count) > MAX_STUDY_CARDS:
        raise InvalidQueryParameter('count', count, f'count must not exceed {MAX_STUDY_CARDS}.')

    return int(count)


@api_view(['GET'])
def stats(request: Request):
    data = {
        'bundles': CardBundle.objects.count(),
        'cards': Card.objects.count(),
        'empty_bundles': CardBundle.objects.filter(cards__isnull=True).count(),
    }
    return JsonResponse(data=data, status=status.HTTP_200_OK)


@api_view(['GET'])
def study_session(request: Request, bundle_pk):
    """
    query_params
    * count:    int,    optional,   number of random cards to draw from the bundle
    """
    try:
        count = parse_study_count(request.query_params)
    except InvalidQueryParameter as e:
        return JsonErrorResponse('invalid query parameters', detail=str(e))

    bundle = get_object_or_404(CardBundle, pk=bundle_pk)
    cards = Card.objects.random_cards(bundle, count)

    logger.info(f"Study session of {len(cards)} cards from bundle ({bundle.id})")

    data = {
        'bundle': {'id': bundle.id, 'title': bundle.title},
        'cards': CardModelSerializer(cards, many=True).data,
    }
    return JsonResponse(data=data, status=status.HTTP_200_OK)
