# -*- coding: utf-8 -*-
"""addbundle

Import a card bundle together with its cards from a JSON document, e.g.

    {
        "title": "Capitals",
        "description": "European capital cities",
        "cards": [
            {"front_text": "France", "back_text": "Paris"},
            {"front_text": "Italy", "back_text": "Rome"}
        ]
    }

Usage:
    export DJANGO_SETTINGS_MODULE=flashcards.settings.local
    python manage.py migrate
    python manage.py help addbundle
    python manage.py addbundle capitals.json
    python manage.py addbundle capitals.json --yes
"""
import json
import logging

from django.core.exceptions import ValidationError
from django.core.management import BaseCommand, CommandParser, CommandError
from django.db import transaction

from flashcards.exceptions import InvalidBundleDocument
from flashcards.models import CardBundle

logger = logging.getLogger(__name__)


def read_bundle_document(path: str) -> dict:
    # JSONDecodeError and UnicodeDecodeError are both ValueError
    try:
        with open(path, 'r', encoding='utf-8') as f:
            doc = json.load(f)
    except (OSError, ValueError) as e:
        raise InvalidBundleDocument(path, str(e))

    if not isinstance(doc, dict) or not isinstance(doc.get('title'), str):
        raise InvalidBundleDocument(path, "document must be an object with a title string")

    if not isinstance(doc.get('description', ''), str):
        raise InvalidBundleDocument(path, "description must be a string")

    cards = doc.get('cards', [])
    if not isinstance(cards, list) or not all(isinstance(c, dict) for c in cards):
        raise InvalidBundleDocument(path, "cards must be a list of objects")

    for i, c in enumerate(cards):
        if not isinstance(c.get('front_text'), str) or not isinstance(c.get('back_text'), str):
            raise InvalidBundleDocument(path, f"card {i} must have front_text and back_text strings")

    return doc

class Command(BaseCommand):
    help = "Import a card bundle and its cards from a JSON document"

    def add_arguments(self, parser: CommandParser):
        parser.add_argument('path', help="Path to bundle JSON document")
        parser.add_argument('-y', '--yes', help="Replace existing bundle of the same title without asking",
                            action="store_true")

    def handle(self, *args, **options):
        opt_path = options['path']
        opt_yes = options['yes']

        try:
            doc = read_bundle_document(opt_path)
        except InvalidBundleDocument as e:
            raise CommandError(str(e))

        title = doc['title']
        existing = CardBundle.objects.filter(title=title)

        if existing.exists() and not opt_yes:
            uin = input(f"Card bundle '{title}' already exists. Replace? (y or n): ")
            if uin != 'y':
                logger.info("Abort upon user request")
                return

        try:
            with transaction.atomic():
                cnt, _ = existing.delete()
                if cnt:
                    logger.info(f"Replaced existing card bundle '{title}'")
                bundle = CardBundle.objects.create_with_cards(
                    title=title,
                    description=doc.get('description', ''),
                    cards=doc.get('cards', []),
                )
        except ValidationError as e:
            raise CommandError(f"Invalid card bundle document: {opt_path}\nError: {e}")

        logger.info(f"Imported card bundle ({bundle.id}) '{bundle.title}' with {bundle.cards.count()} cards")
        self.stdout.write(str(bundle.id))
