from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from rest_framework import serializers
from rest_framework.exceptions import ValidationError

from flashcards.models import CardBundle, Card


class CardModelSerializer(serializers.ModelSerializer):
    class Meta:
        model = Card
        fields = ['id', 'front_text', 'back_text', 'bundle']
        read_only_fields = ['bundle']


class CardContentSerializer(serializers.ModelSerializer):
    """card payload nested inside a bundle document, i.e. without bundle reference"""
    class Meta:
        model = Card
        fields = ['front_text', 'back_text']


class CardBundleModelSerializer(serializers.ModelSerializer):
    card_count = serializers.SerializerMethodField()
    cards = CardContentSerializer(many=True, required=False, write_only=True)

    class Meta:
        model = CardBundle
        fields = ['id', 'title', 'description', 'card_count', 'cards']

    def get_card_count(self, obj: CardBundle) -> int:
        card_count = getattr(obj, 'card_count', None)
        if card_count is None:
            card_count = obj.cards.count()
        return card_count

    def create(self, validated_data):
        cards = validated_data.pop('cards', [])
        try:
            return CardBundle.objects.create_with_cards(cards=cards, **validated_data)
        except DjangoValidationError as e:
            raise ValidationError(detail=e.message_dict if hasattr(e, 'error_dict') else e.messages)

    def update(self, instance, validated_data):
        if 'cards' in validated_data:
            raise ValidationError({'cards': "Cards of an existing bundle are managed at /bundles/<id>/cards"})
        with transaction.atomic():
            return super().update(instance, validated_data)


class CardBundleDetailSerializer(CardBundleModelSerializer):
    cards = CardModelSerializer(many=True, read_only=True)
