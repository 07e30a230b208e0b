from django.core.serializers.json import DjangoJSONEncoder
from django.http import JsonResponse
from rest_framework.status import HTTP_400_BAD_REQUEST


class JsonErrorResponse(JsonResponse):
    """{"errors": ...} body, plus "detail" when given; 400 unless another status is passed"""

    def __init__(self, errors: str, detail: str = None, status=HTTP_400_BAD_REQUEST, **kwargs):
        data = {'errors': errors}
        if detail:
            data['detail'] = detail
        super().__init__(data, encoder=DjangoJSONEncoder, status=status, **kwargs)
