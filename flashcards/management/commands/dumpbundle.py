# -*- coding: utf-8 -*-
"""dumpbundle

Print a card bundle and its cards as JSON document, in the shape addbundle reads.

Usage:
    python manage.py dumpbundle 1 > capitals.json
"""
import json

from django.core.management import BaseCommand, CommandParser, CommandError

from flashcards.models import CardBundle


class Command(BaseCommand):
    help = "Print a card bundle and its cards as JSON document"

    def add_arguments(self, parser: CommandParser):
        parser.add_argument('id', type=int, help="Card bundle id")

    def handle(self, *args, **options):
        try:
            bundle = CardBundle.objects.get(pk=options['id'])
        except CardBundle.DoesNotExist:
            raise CommandError(f"Card bundle ({options['id']}) does not exist")

        doc = {
            'title': bundle.title,
            'description': bundle.description,
            'cards': [
                {'front_text': c.front_text, 'back_text': c.back_text} for c in bundle.cards.order_by('id')
            ],
        }
        self.stdout.write(json.dumps(doc, indent=2))
