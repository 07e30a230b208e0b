import logging

from django.db import models
from django.db.models import QuerySet

from flashcards.exceptions import InvalidQueryParameter
from flashcards.models.base import FlashcardsBaseModel, FlashcardsBaseManager
from flashcards.models.cardbundle import CardBundle

logger = logging.getLogger(__name__)


class CardManager(FlashcardsBaseManager):

    def create_card(self, bundle: CardBundle, front_text: str, back_text: str) -> 'Card':
        card = self.validate_and_save(Card(bundle=bundle, front_text=front_text, back_text=back_text))
        logger.debug(f"Created card ({card.id}) in bundle ({bundle.id})")
        return card

    def get_by_keyword(self, **kwargs) -> QuerySet:
        qs: QuerySet = self.select_related('bundle')

        bundle = kwargs.get('bundle', None)
        if bundle:
            if not str(bundle).isdecimal():
                raise InvalidQueryParameter('bundle', bundle, 'bundle must be a card bundle id.')
            qs = qs.filter(bundle_id=int(bundle))

        return self.get_model_fields_query(qs, **kwargs)

    def random_cards(self, bundle: CardBundle, count: int) -> QuerySet:
        return self.filter(bundle=bundle).order_by('?')[:count]


class Card(FlashcardsBaseModel):
    id = models.BigAutoField(primary_key=True)
    front_text = models.CharField(max_length=500)
    back_text = models.CharField(max_length=500)
    bundle = models.ForeignKey(CardBundle, on_delete=models.CASCADE, related_name='cards')

    objects = CardManager()

    def __str__(self):
        return self.front_text
