from django.test import TestCase

from flashcards.models import CardBundle
from flashcards.models.utils import filter_object_by_parameter_keyword
from flashcards.tests.factories import CardBundleFactory


class FilterObjectByParameterKeywordTests(TestCase):

    def setUp(self) -> None:
        CardBundleFactory()
        CardBundleFactory(title="Verbs", description="Irregular verbs")

    def test_no_field_names_leaves_queryset(self):
        qs = filter_object_by_parameter_keyword(CardBundle.objects.all(), {'title': "Verbs"})
        self.assertEqual(qs.count(), 2)

    def test_keywords_are_combined(self):
        fields = CardBundle.get_base_fields()

        qs = filter_object_by_parameter_keyword(CardBundle.objects.all(), {'title': "verbs"}, fields)
        self.assertEqual(qs.count(), 1)

        qs = filter_object_by_parameter_keyword(
            CardBundle.objects.all(), {'title': "verbs", 'description': "something else"}, fields)
        self.assertEqual(qs.count(), 0)
