from rest_framework.routers import SimpleRouter

from .views import ClassSessionViewSet

router = SimpleRouter()
router.register(r"classes", ClassSessionViewSet, basename="class-session")

urlpatterns = router.urls
