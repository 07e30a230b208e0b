from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from rest_framework.settings import api_settings

MAX_ROWS_PER_PAGE = 500


class StandardResultsSetPagination(PageNumberPagination):
    """page number pagination, sized by the rowsPerPage query parameter"""
    page_size = api_settings.PAGE_SIZE
    page_size_query_param = 'rowsPerPage'
    max_page_size = MAX_ROWS_PER_PAGE

    def get_paginated_response(self, data):
        paginator = self.page.paginator
        return Response({
            'links': {
                'next': self.get_next_link(),
                'previous': self.get_previous_link(),
            },
            'pagination': {
                'count': paginator.count,
                'page': self.page.number,
                'pages': paginator.num_pages,
                'rowsPerPage': self.get_page_size(self.request),
            },
            'results': data
        })
