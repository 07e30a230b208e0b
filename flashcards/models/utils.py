from django.db.models import QuerySet, Q


def filter_object_by_parameter_keyword(qs: QuerySet, keyword_object, field_names=()) -> QuerySet:
    """
    Narrow the queryset with a case-insensitive exact match per keyword. Keywords that are not
    in field_names (e.g. page, search, ordering query parameters) are ignored.

    :param
        qs: queryset to filter
        keyword_object: mapping of field name to value, e.g. request query params
        field_names: model field names that can be matched
    :return
        qs: filtered queryset, or the given one when no keyword applies
    """
    queries = [Q(**{f"{key}__iexact": value}) for key, value in keyword_object.items() if key in field_names]

    if not queries:
        return qs

    query = queries[0]
    for q in queries[1:]:
        query &= q

    return qs.filter(query)
