from django.urls import path
from .views import (
    HealthCheckView,
    PollResultView,
    WebhookView,
)

app_name = "chatpoll"

urlpatterns = [
    path("health/", HealthCheckView.as_view(), name="health-check"),
    path("webhook/", WebhookView.as_view(), name="webhook"),
    path("results/", PollResultView.as_view(), name="poll-results"),
]
