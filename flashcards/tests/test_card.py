import logging

from django.core.exceptions import ValidationError
from django.test import TestCase

from flashcards.exceptions import InvalidQueryParameter
from flashcards.models import Card
from flashcards.tests.factories import CardBundleFactory, CardFactory, TestConstant

logger = logging.getLogger()
logger.setLevel(logging.INFO)


class CardTestCase(TestCase):

    def setUp(self) -> None:
        self.bundle = CardBundleFactory()

    def test_create_card(self):
        card = Card.objects.create_card(
            bundle=self.bundle,
            front_text=TestConstant.front_text.value,
            back_text=TestConstant.back_text.value,
        )
        self.assertEqual(str(card), TestConstant.front_text.value)
        self.assertEqual(card.bundle, self.bundle)
        self.assertEqual(list(self.bundle.cards.all()), [card])

    def test_create_card_text_too_long(self):
        with self.assertRaises(ValidationError) as cm:
            Card.objects.create_card(bundle=self.bundle, front_text="f" * 501, back_text="b" * 501)
        self.assertIn('front_text', cm.exception.message_dict)
        self.assertIn('back_text', cm.exception.message_dict)
        self.assertEqual(Card.objects.count(), 0)

    def test_create_card_requires_text(self):
        with self.assertRaises(ValidationError):
            Card.objects.create_card(bundle=self.bundle, front_text="", back_text=TestConstant.back_text.value)

    def test_get_by_keyword_bundle(self):
        CardFactory(bundle=self.bundle)
        CardFactory(bundle=CardBundleFactory(title="Other"))

        qs = Card.objects.get_by_keyword(bundle=str(self.bundle.id))
        self.assertEqual(qs.count(), 1)
        self.assertEqual(qs.get().bundle_id, self.bundle.id)

    def test_get_by_keyword_invalid_bundle(self):
        with self.assertRaises(InvalidQueryParameter):
            Card.objects.get_by_keyword(bundle="abc")

    def test_get_by_keyword_text(self):
        CardFactory(bundle=self.bundle)
        CardFactory(bundle=self.bundle, front_text=TestConstant.front_text2.value,
                    back_text=TestConstant.back_text2.value)

        qs = Card.objects.get_by_keyword(back_text="rome")
        self.assertEqual(qs.count(), 1)
        self.assertEqual(qs.get().front_text, TestConstant.front_text2.value)

    def test_random_cards(self):
        for i in range(5):
            CardFactory(bundle=self.bundle, front_text=f"front {i}")
        CardFactory(bundle=CardBundleFactory(title="Other"))

        cards = list(Card.objects.random_cards(self.bundle, 3))
        self.assertEqual(len(cards), 3)
        self.assertTrue(all(c.bundle_id == self.bundle.id for c in cards))

        logger.info("Asking for more than the bundle holds returns the whole bundle")
        self.assertEqual(len(Card.objects.random_cards(self.bundle, 50)), 5)
