from django.urls import path, re_path, include

from flashcards import views
from flashcards.routers import OptionalSlashDefaultRouter, OptionalSlashNestedRouter
from flashcards.viewsets.card import CardViewSet, BundleCardViewSet
from flashcards.viewsets.cardbundle import CardBundleViewSet

router = OptionalSlashDefaultRouter()
router.register(r'bundles', CardBundleViewSet, basename='bundles')
router.register(r'cards', CardViewSet, basename='cards')

bundles_router = OptionalSlashNestedRouter(router, r'bundles', lookup='bundle')
bundles_router.register(r'cards', BundleCardViewSet, basename='bundle-cards')

urlpatterns = [
    re_path(r'^stats/?$', views.stats, name='stats'),
    re_path(r'^bundles/(?P<bundle_pk>\d+)/study/?$', views.study_session, name='study-session'),
    path('', include(router.urls)),
    path('', include(bundles_router.urls)),
]

handler500 = 'rest_framework.exceptions.server_error'
handler400 = 'rest_framework.exceptions.bad_request'
