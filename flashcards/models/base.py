from django.db import models
from django.db.models import QuerySet

from .utils import filter_object_by_parameter_keyword


class FlashcardsBaseModel(models.Model):
    class Meta:
        abstract = True

    @classmethod
    def get_base_fields(cls):
        """text fields that can be matched by keyword, i.e. excluding keys and relations"""
        return [f.name for f in cls._meta.get_fields() if isinstance(f, (models.CharField, models.TextField))]


class FlashcardsBaseManager(models.Manager):

    def get_model_fields_query(self, qs: QuerySet, **kwargs) -> QuerySet:
        return filter_object_by_parameter_keyword(qs, kwargs, self.model.get_base_fields())

    def validate_and_save(self, obj):
        obj.full_clean()
        obj.save()
        return obj
