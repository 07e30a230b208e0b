import logging

from django.db import models, transaction
from django.db.models import QuerySet, Count

from flashcards.models.base import FlashcardsBaseModel, FlashcardsBaseManager

logger = logging.getLogger(__name__)


class CardBundleManager(FlashcardsBaseManager):

    def create_bundle(self, title: str, description: str = '') -> 'CardBundle':
        bundle = self.validate_and_save(CardBundle(title=title, description=description))
        logger.info(f"Created card bundle ({bundle.id}) '{bundle.title}'")
        return bundle

    def create_with_cards(self, title: str, description: str = '', cards=()) -> 'CardBundle':
        """
        Create a bundle together with its cards. Either everything is saved or, on the first invalid
        record, nothing is and the ValidationError is raised.

        :param title: bundle title
        :param description: bundle description
        :param cards: iterable of mappings with front_text and back_text keys
        :return: the saved bundle
        """
        from flashcards.models.card import Card

        with transaction.atomic():
            bundle = self.create_bundle(title=title, description=description)
            for c in cards:
                Card.objects.create_card(
                    bundle=bundle,
                    front_text=c.get('front_text', ''),
                    back_text=c.get('back_text', ''),
                )
        return bundle

    def with_card_count(self) -> QuerySet:
        return self.annotate(card_count=Count('cards'))

    def get_by_keyword(self, **kwargs) -> QuerySet:
        qs: QuerySet = self.with_card_count()
        return self.get_model_fields_query(qs, **kwargs)


class CardBundle(FlashcardsBaseModel):
    id = models.BigAutoField(primary_key=True)
    title = models.CharField(max_length=30)
    description = models.CharField(max_length=500, blank=True, default='')

    objects = CardBundleManager()

    def __str__(self):
        return self.title
