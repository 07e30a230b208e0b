import logging

from django.core.exceptions import ValidationError
from django.test import TestCase

from flashcards.models import CardBundle, Card
from flashcards.tests.factories import CardBundleFactory, CardFactory, TestConstant

logger = logging.getLogger()
logger.setLevel(logging.INFO)


class CardBundleTestCase(TestCase):

    def test_create_bundle(self):
        bundle = CardBundle.objects.create_bundle(
            title=TestConstant.bundle_title.value,
            description=TestConstant.bundle_description.value,
        )
        self.assertIsNotNone(bundle.id)
        self.assertEqual(str(bundle), TestConstant.bundle_title.value)
        self.assertEqual(bundle.cards.count(), 0)

    def test_create_bundle_title_too_long(self):
        with self.assertRaises(ValidationError) as cm:
            CardBundle.objects.create_bundle(title="x" * 31)
        self.assertIn('title', cm.exception.message_dict)
        self.assertEqual(CardBundle.objects.count(), 0)

    def test_create_bundle_title_at_bound(self):
        bundle = CardBundle.objects.create_bundle(title="x" * 30, description="d" * 500)
        self.assertEqual(len(bundle.title), 30)

    def test_create_bundle_description_too_long(self):
        with self.assertRaises(ValidationError) as cm:
            CardBundle.objects.create_bundle(title="Too wordy", description="d" * 501)
        self.assertIn('description', cm.exception.message_dict)

    def test_create_with_cards(self):
        bundle = CardBundle.objects.create_with_cards(
            title=TestConstant.bundle_title.value,
            cards=[
                {'front_text': TestConstant.front_text.value, 'back_text': TestConstant.back_text.value},
                {'front_text': TestConstant.front_text2.value, 'back_text': TestConstant.back_text2.value},
            ]
        )
        self.assertEqual(bundle.cards.count(), 2)
        self.assertEqual(bundle.description, '')

    def test_create_with_cards_invalid_card_writes_nothing(self):
        with self.assertRaises(ValidationError):
            CardBundle.objects.create_with_cards(
                title=TestConstant.bundle_title.value,
                cards=[
                    {'front_text': TestConstant.front_text.value, 'back_text': TestConstant.back_text.value},
                    {'front_text': "f" * 501, 'back_text': TestConstant.back_text2.value},
                ]
            )
        self.assertEqual(CardBundle.objects.count(), 0)
        self.assertEqual(Card.objects.count(), 0)

    def test_delete_bundle_cascades_to_cards(self):
        bundle = CardBundleFactory()
        CardFactory(bundle=bundle)
        CardFactory(bundle=bundle, front_text=TestConstant.front_text2.value)
        other = CardFactory(bundle=CardBundleFactory(title="Other"))

        bundle.delete()

        self.assertEqual(Card.objects.count(), 1)
        self.assertTrue(Card.objects.filter(pk=other.pk).exists())

    def test_get_by_keyword(self):
        CardBundleFactory()
        CardBundleFactory(title="Verbs", description="Irregular verbs")

        qs = CardBundle.objects.get_by_keyword(title="capitals")
        self.assertEqual(qs.count(), 1)
        self.assertEqual(qs.get().title, TestConstant.bundle_title.value)

        logger.info("Unknown keys are ignored")
        qs = CardBundle.objects.get_by_keyword(page="2", rowsPerPage="10")
        self.assertEqual(qs.count(), 2)

    def test_get_by_keyword_card_count(self):
        bundle = CardBundleFactory()
        CardFactory(bundle=bundle)
        CardFactory(bundle=bundle)
        CardBundleFactory(title="Empty")

        counts = {b.title: b.card_count for b in CardBundle.objects.get_by_keyword()}
        self.assertEqual(counts, {TestConstant.bundle_title.value: 2, "Empty": 0})
