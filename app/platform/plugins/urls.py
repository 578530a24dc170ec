from rest_framework.routers import DefaultRouter

from .views import PluginViewSet

router = DefaultRouter()
router.register(r"plugins", PluginViewSet, basename="plugins")

urlpatterns = router.urls
